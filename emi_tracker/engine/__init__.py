"""Loan amortization and projection engine."""

from emi_tracker.engine.amortization import (
    MAX_AMORTIZATION_MONTHS,
    amortization_step,
    forward_apply,
    iter_schedule,
    remaining_months,
    size_tenure,
)
from emi_tracker.engine.emi import calculate_emi, monthly_rate
from emi_tracker.engine.portfolio import (
    build_summary,
    next_portfolio_emi_date,
    savings_by_category,
    total_debt,
    total_monthly_emi,
    total_savings,
)
from emi_tracker.engine.projection import PROJECTION_MONTHS, project_loan, project_portfolio
from emi_tracker.engine.resolver import (
    add_part_payment,
    create_loan,
    reconcile,
    remove_last_part_payment,
    resolve_loan,
    selected_emi,
)
from emi_tracker.engine.schedule import (
    DUE_DAY,
    first_due_date,
    next_emi_date,
    next_refresh_date,
    payments_due,
    should_auto_refresh,
)
from emi_tracker.engine.suggestions import analyze_loans, generate_suggestions
from emi_tracker.engine.what_if import part_payment_savings

__all__ = [
    "DUE_DAY",
    "MAX_AMORTIZATION_MONTHS",
    "PROJECTION_MONTHS",
    "add_part_payment",
    "amortization_step",
    "analyze_loans",
    "build_summary",
    "calculate_emi",
    "create_loan",
    "first_due_date",
    "forward_apply",
    "generate_suggestions",
    "iter_schedule",
    "monthly_rate",
    "next_emi_date",
    "next_portfolio_emi_date",
    "next_refresh_date",
    "part_payment_savings",
    "payments_due",
    "project_loan",
    "project_portfolio",
    "reconcile",
    "remaining_months",
    "remove_last_part_payment",
    "resolve_loan",
    "savings_by_category",
    "selected_emi",
    "should_auto_refresh",
    "size_tenure",
    "total_debt",
    "total_monthly_emi",
    "total_savings",
]
