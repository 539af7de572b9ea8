"""Domain models for loans, savings and derived results."""

from emi_tracker.models.calculation import (
    AmortizationRun,
    AmortizationStep,
    CategoryTotal,
    CombinedProjectionEntry,
    LoanAnalysis,
    LoanDetails,
    PortfolioSummary,
    ProjectionEntry,
    Suggestion,
    TenureSizing,
)
from emi_tracker.models.enums import (
    Priority,
    RateEfficiency,
    SavingsCategory,
    SizingStatus,
    SuggestionType,
)
from emi_tracker.models.loan import InterestRateChange, Loan, LoanEdit, PartPayment
from emi_tracker.models.savings import SavingsAccount

__all__ = [
    "AmortizationRun",
    "AmortizationStep",
    "CategoryTotal",
    "CombinedProjectionEntry",
    "InterestRateChange",
    "Loan",
    "LoanAnalysis",
    "LoanDetails",
    "LoanEdit",
    "PartPayment",
    "PortfolioSummary",
    "Priority",
    "ProjectionEntry",
    "RateEfficiency",
    "SavingsAccount",
    "SavingsCategory",
    "SizingStatus",
    "Suggestion",
    "SuggestionType",
    "TenureSizing",
]
