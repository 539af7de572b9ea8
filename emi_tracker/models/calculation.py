"""Derived records produced by the engine.

Monetary values here are plain floats: they come out of the compounding
math and are rounded only for display or storage.
"""

from dataclasses import dataclass, field
from datetime import date

from emi_tracker.models.enums import Priority, RateEfficiency, SavingsCategory, SizingStatus, SuggestionType
from emi_tracker.models.loan import Loan


@dataclass(frozen=True)
class AmortizationStep:
    """One month of a schedule."""

    month: int
    interest: float
    principal_portion: float
    balance: float  # After this month's payment

    @property
    def is_stuck(self) -> bool:
        """Payment did not cover the month's interest."""
        return self.principal_portion <= 0


@dataclass(frozen=True)
class AmortizationRun:
    """Summary of walking a balance forward."""

    balance: float
    months_applied: int
    total_interest: float
    stuck: bool


@dataclass(frozen=True)
class TenureSizing:
    """Months needed to clear an outstanding balance."""

    months: int
    status: SizingStatus

    @property
    def is_sizable(self) -> bool:
        return self.status in (SizingStatus.AMORTIZES, SizingStatus.EXCEEDS_CAP)


@dataclass(frozen=True)
class LoanDetails:
    """Snapshot of a loan as of a given day."""

    emi_amount: float
    total_interest: float
    total_amount: float
    remaining_emis: int
    remaining_principal: float
    next_emi_date: date
    emis_paid: int = 0
    can_amortize: bool = True


@dataclass(frozen=True)
class ProjectionEntry:
    month: int
    principal_payment: float
    interest_payment: float
    remaining_principal: float


@dataclass(frozen=True)
class CombinedProjectionEntry:
    month: int
    total_principal_payment: float
    total_interest_payment: float
    total_remaining_principal: float


@dataclass(frozen=True)
class Suggestion:
    suggestion_id: str
    suggestion_type: SuggestionType
    title: str
    description: str
    priority: Priority
    potential_savings: float | None = None
    loan_id: str | None = None


@dataclass(frozen=True)
class LoanAnalysis:
    loan: Loan
    details: LoanDetails
    part_payment_savings: float
    efficiency: RateEfficiency
    recommendation: str


@dataclass(frozen=True)
class CategoryTotal:
    category: SavingsCategory
    total: float
    count: int


@dataclass
class PortfolioSummary:
    """Dashboard figures for a loan and savings portfolio."""

    total_outstanding_debt: float
    total_savings: float
    monthly_emi: float
    next_emi_date: date
    active_loans: int
    suggestions: list[Suggestion] = field(default_factory=list)
