"""Forward projections for charting."""

from datetime import date

from emi_tracker.engine.amortization import iter_schedule
from emi_tracker.engine.emi import monthly_rate
from emi_tracker.engine.resolver import resolve_loan
from emi_tracker.models.calculation import CombinedProjectionEntry, ProjectionEntry
from emi_tracker.models.loan import Loan

PROJECTION_MONTHS = 60


def project_loan(loan: Loan, today: date, horizon: int = PROJECTION_MONTHS) -> list[ProjectionEntry]:
    """Monthly principal/interest split for one loan.

    Covers at most ``min(remaining_emis, horizon)`` months and ends early
    once the balance is cleared, so a loan with no balance left projects
    no months at all and returns an empty list. A payment that does not
    cover interest still projects interest-only months.
    """
    details = resolve_loan(loan, today)
    months = min(details.remaining_emis, horizon)
    steps = iter_schedule(
        details.remaining_principal,
        details.emi_amount,
        monthly_rate(loan.interest_rate),
        months,
        stop_when_stuck=False,
    )
    return [
        ProjectionEntry(
            month=step.month,
            principal_payment=step.principal_portion,
            interest_payment=step.interest,
            remaining_principal=step.balance,
        )
        for step in steps
    ]


def project_portfolio(
    loans: list[Loan],
    today: date,
    horizon: int = PROJECTION_MONTHS,
) -> list[CombinedProjectionEntry]:
    """Sum the per-loan projections of all active loans month by month.

    Loans with fewer remaining months stop contributing. The series ends
    after month 1 at the first month with no balance left and no payment
    made, so the month of the final payment is included.
    """
    by_month: list[dict[int, ProjectionEntry]] = [
        {entry.month: entry for entry in project_loan(loan, today, horizon)}
        for loan in loans
        if loan.is_active
    ]

    combined: list[CombinedProjectionEntry] = []
    for month in range(1, horizon + 1):
        entries = [projection[month] for projection in by_month if month in projection]
        total_principal = sum(entry.principal_payment for entry in entries)
        total_interest = sum(entry.interest_payment for entry in entries)
        total_remaining = sum(entry.remaining_principal for entry in entries)

        if month > 1 and total_remaining <= 0 and total_principal <= 0 and total_interest <= 0:
            break

        combined.append(
            CombinedProjectionEntry(
                month=month,
                total_principal_payment=total_principal,
                total_interest_payment=total_interest,
                total_remaining_principal=total_remaining,
            )
        )

    return combined
