"""Month-by-month amortization walks.

A single step charges a month of interest on the balance and applies the
rest of the payment to principal. The same step drives three things:
bringing a stored balance current, projecting future months, and sizing
how many months a payment needs to clear a balance.
"""

import logging
from typing import Any, Iterator

from emi_tracker.engine.emi import monthly_rate
from emi_tracker.engine.money import to_number
from emi_tracker.models.calculation import AmortizationRun, AmortizationStep, TenureSizing
from emi_tracker.models.enums import SizingStatus

logger = logging.getLogger(__name__)

MAX_AMORTIZATION_MONTHS = 1200

# Residue below half a cent counts as paid off when sizing a tenure
PAID_OFF_TOLERANCE = 0.005


def amortization_step(balance: float, emi: float, rate: float, month: int = 1) -> AmortizationStep:
    """Split one payment into interest and principal."""
    interest = balance * rate
    principal_portion = max(0.0, emi - interest)
    return AmortizationStep(
        month=month,
        interest=interest,
        principal_portion=principal_portion,
        balance=max(0.0, balance - principal_portion),
    )


def iter_schedule(
    balance: float,
    emi: float,
    rate: float,
    months: int,
    stop_when_stuck: bool = True,
) -> Iterator[AmortizationStep]:
    """Yield up to ``months`` steps starting from ``balance``.

    Parameters
    ----------
    balance : float
        Opening balance.
    emi : float
        Fixed monthly payment.
    rate : float
        Monthly interest rate as a fraction.
    months : int
        Maximum number of steps.
    stop_when_stuck : bool
        When true, nothing is yielded for a non-positive payment and the
        walk ends after the first step whose principal portion is zero.
        The stuck step itself is still yielded so its interest counts.

    Yields
    ------
    AmortizationStep
        One entry per simulated month, numbered from 1.
    """
    if stop_when_stuck and emi <= 0:
        return

    for month in range(1, months + 1):
        if balance <= 0:
            return
        step = amortization_step(balance, emi, rate, month)
        yield step
        balance = step.balance
        if stop_when_stuck and step.is_stuck:
            logger.debug("Payment %.2f does not cover interest %.2f", emi, step.interest)
            return


def forward_apply(
    balance: float,
    emi: float,
    rate: float,
    months: int,
    stop_when_stuck: bool = True,
) -> AmortizationRun:
    """Walk a balance forward and summarize the result."""
    applied = 0
    total_interest = 0.0
    stuck = False
    for step in iter_schedule(balance, emi, rate, months, stop_when_stuck):
        applied = step.month
        total_interest += step.interest
        balance = step.balance
        stuck = step.is_stuck
    return AmortizationRun(
        balance=max(0.0, balance),
        months_applied=applied,
        total_interest=total_interest,
        stuck=stuck,
    )


def size_tenure(
    outstanding: Any,
    emi: Any,
    annual_rate: Any,
    max_months: int = MAX_AMORTIZATION_MONTHS,
) -> TenureSizing:
    """Count the months ``emi`` needs to clear ``outstanding``.

    Returns
    -------
    TenureSizing
        ``CANNOT_AMORTIZE`` (0 months) when the payment never covers the
        interest, ``EXCEEDS_CAP`` (``max_months``) when the balance is still
        open at the cap, ``PAID_OFF`` (0 months) when nothing is owed.
    """
    balance = to_number(outstanding)
    if balance <= PAID_OFF_TOLERANCE:
        return TenureSizing(months=0, status=SizingStatus.PAID_OFF)

    months = 0
    for step in iter_schedule(balance, to_number(emi), monthly_rate(annual_rate), max_months):
        if step.is_stuck:
            return TenureSizing(months=0, status=SizingStatus.CANNOT_AMORTIZE)
        months = step.month
        if step.balance <= PAID_OFF_TOLERANCE:
            return TenureSizing(months=months, status=SizingStatus.AMORTIZES)

    if months == 0:
        return TenureSizing(months=0, status=SizingStatus.CANNOT_AMORTIZE)
    return TenureSizing(months=max_months, status=SizingStatus.EXCEEDS_CAP)


def remaining_months(
    outstanding: Any,
    emi: Any,
    annual_rate: Any,
    max_months: int = MAX_AMORTIZATION_MONTHS,
) -> int:
    """Months to clear ``outstanding``; 0 means it cannot be sized."""
    return size_tenure(outstanding, emi, annual_rate, max_months).months
