"""Enumeration types for loan and savings entities."""

from enum import Enum


class SavingsCategory(str, Enum):
    EMERGENCY_FUND = "Emergency Fund"
    FIXED_DEPOSIT = "Fixed Deposit"
    MUTUAL_FUNDS = "Mutual Funds"
    SAVINGS_ACCOUNT = "Savings Account"
    PPF = "PPF"
    OTHER = "Other"


class SuggestionType(str, Enum):
    PART_PAYMENT = "part_payment"
    RATE_CHANGE = "rate_change"
    SAVINGS = "savings"
    GENERAL = "general"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SizingStatus(str, Enum):
    """Outcome of sizing a tenure from an outstanding balance and EMI."""

    PAID_OFF = "PAID_OFF"
    AMORTIZES = "AMORTIZES"
    EXCEEDS_CAP = "EXCEEDS_CAP"
    CANNOT_AMORTIZE = "CANNOT_AMORTIZE"


class RateEfficiency(str, Enum):
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
