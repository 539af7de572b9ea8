"""Custom exception hierarchy for emi-tracker."""


class EmiTrackerError(Exception):
    """Base exception for all emi-tracker errors."""


class EntityNotFoundError(EmiTrackerError):
    """Raised when a referenced entity does not exist."""


class LoanNotFoundError(EntityNotFoundError):
    """Raised when a loan id is not in the portfolio."""


class SavingsAccountNotFoundError(EntityNotFoundError):
    """Raised when a savings account id is not in the portfolio."""


class ConfigurationError(EmiTrackerError):
    """Raised when configuration is invalid or missing."""


class ImportFormatError(EmiTrackerError):
    """Raised when an export document cannot be read back."""
