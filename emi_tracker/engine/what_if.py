"""Part-payment what-if estimates."""

from datetime import date
from typing import Any

from emi_tracker.engine.amortization import forward_apply
from emi_tracker.engine.emi import monthly_rate
from emi_tracker.engine.money import to_number
from emi_tracker.engine.resolver import resolve_loan, selected_emi
from emi_tracker.models.loan import Loan


def part_payment_savings(loan: Loan, amount: Any, today: date) -> float:
    """Interest saved by paying ``amount`` extra today.

    The payment count and EMI stay fixed; only the balance they amortize
    shrinks. Paying the whole balance saves all remaining interest.
    Nothing is written back to the loan.
    """
    details = resolve_loan(loan, today)
    paid = to_number(amount)

    if paid >= details.remaining_principal:
        return details.total_interest

    new_principal = details.remaining_principal - paid
    rerun = forward_apply(
        new_principal,
        selected_emi(loan),
        monthly_rate(loan.interest_rate),
        details.remaining_emis,
    )
    return max(0.0, details.total_interest - rerun.total_interest)
