"""Standard annuity (EMI) formula."""

from typing import Any

from emi_tracker.engine.money import to_number


def monthly_rate(annual_rate: Any) -> float:
    """Convert a nominal annual percentage into a monthly fraction."""
    return to_number(annual_rate) / 100 / 12


def calculate_emi(principal: Any, annual_rate: Any, tenure_months: Any) -> float:
    """Calculate EMI using the standard formula.

    ``EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)``

    Parameters
    ----------
    principal : Any
        Amount to amortize.
    annual_rate : Any
        Nominal annual rate in percent.
    tenure_months : Any
        Number of monthly payments.

    Returns
    -------
    float
        Monthly payment, or 0 when any input is non-positive.
    """
    p = to_number(principal)
    n = to_number(tenure_months)
    r = monthly_rate(annual_rate)
    if n <= 0 or p <= 0 or r <= 0:
        return 0.0
    try:
        compound = (1 + r) ** n
    except OverflowError:
        # Limit for an unbounded tenure
        return p * r
    return p * r * compound / (compound - 1)
