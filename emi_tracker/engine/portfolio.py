"""Portfolio-wide totals."""

from collections.abc import Iterable
from datetime import date

from emi_tracker.config import AdvisorConfig
from emi_tracker.engine.money import to_number
from emi_tracker.engine.resolver import resolve_loan
from emi_tracker.engine.schedule import next_emi_date
from emi_tracker.engine.suggestions import generate_suggestions
from emi_tracker.models.calculation import CategoryTotal, PortfolioSummary
from emi_tracker.models.enums import SavingsCategory
from emi_tracker.models.loan import Loan
from emi_tracker.models.savings import SavingsAccount


def active_loans(loans: Iterable[Loan]) -> list[Loan]:
    return [loan for loan in loans if loan.is_active]


def total_debt(loans: Iterable[Loan], today: date) -> float:
    """Live outstanding principal across active loans."""
    return sum(resolve_loan(loan, today).remaining_principal for loan in active_loans(loans))


def total_monthly_emi(loans: Iterable[Loan], today: date) -> float:
    """Monthly obligation of active loans that still have EMIs left."""
    total = 0.0
    for loan in active_loans(loans):
        details = resolve_loan(loan, today)
        if details.remaining_emis > 0:
            total += details.emi_amount
    return total


def next_portfolio_emi_date(loans: Iterable[Loan], today: date) -> date:
    """Earliest upcoming due date, or the next due day when no loan is active."""
    dates = [resolve_loan(loan, today).next_emi_date for loan in active_loans(loans)]
    return min(dates) if dates else next_emi_date(today)


def total_savings(savings: Iterable[SavingsAccount]) -> float:
    return sum(to_number(account.amount) for account in savings)


def savings_by_category(savings: Iterable[SavingsAccount]) -> list[CategoryTotal]:
    """Totals per category, in order of first appearance."""
    grouped: dict[SavingsCategory, list[SavingsAccount]] = {}
    for account in savings:
        grouped.setdefault(account.category, []).append(account)
    return [
        CategoryTotal(category=category, total=total_savings(accounts), count=len(accounts))
        for category, accounts in grouped.items()
    ]


def build_summary(
    loans: list[Loan],
    savings: list[SavingsAccount],
    today: date,
    config: AdvisorConfig | None = None,
) -> PortfolioSummary:
    """Dashboard figures for the whole portfolio."""
    return PortfolioSummary(
        total_outstanding_debt=total_debt(loans, today),
        total_savings=total_savings(savings),
        monthly_emi=total_monthly_emi(loans, today),
        next_emi_date=next_portfolio_emi_date(loans, today),
        active_loans=len(active_loans(loans)),
        suggestions=generate_suggestions(loans, today, config),
    )
