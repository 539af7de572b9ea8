"""Loan models."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass
class PartPayment:
    """Out-of-schedule principal reduction.

    ``principal_reduction`` is how much the payment took off the stored
    ``Loan.current_principal``. It is smaller than ``amount`` when EMIs had
    already fallen due, and is what an undo adds back.
    """

    payment_id: str
    amount: Decimal
    payment_date: date
    description: str = ""
    principal_reduction: Decimal | None = None  # None: equal to amount


@dataclass
class InterestRateChange:
    """Logged rate edit. Informational only, never amortized."""

    change_id: str
    old_rate: Decimal
    new_rate: Decimal
    effective_date: date
    reason: str = ""


@dataclass
class Loan:
    """A single debt obligation as entered by the user.

    ``current_principal`` is the balance anchored at origination, net of
    part payments, not the live amortized balance. The resolver walks it
    forward over every EMI due since ``start_date``.
    """

    loan_id: str
    name: str
    principal_amount: Decimal
    current_principal: Decimal
    interest_rate: Decimal  # Annual percent (e.g., 9.5)
    emi_amount: Decimal
    start_date: date
    tenure: int  # Scheduled monthly payments from origination
    next_emi_date: date | None = None
    last_emi_date: date | None = None
    is_active: bool = True
    part_payments: list[PartPayment] = field(default_factory=list)
    interest_rate_changes: list[InterestRateChange] = field(default_factory=list)
    use_custom_emi: bool = False
    custom_emi: Decimal | None = None


@dataclass
class LoanEdit:
    """Partial edit of a loan. ``None`` means "not edited"."""

    name: str | None = None
    principal_amount: Decimal | None = None
    current_principal: Decimal | None = None
    interest_rate: Decimal | None = None
    tenure: int | None = None
    emi_amount: Decimal | None = None
    use_custom_emi: bool | None = None
    custom_emi: Decimal | None = None
    start_date: date | None = None
    is_active: bool | None = None
