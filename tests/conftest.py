"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from emi_tracker.clock import FixedClock
from emi_tracker.engine.resolver import create_loan
from emi_tracker.models.loan import Loan


@pytest.fixture
def today() -> date:
    """Fixed reference day, after the 5th so June's EMI is already due."""
    return date(2024, 6, 10)


@pytest.fixture
def clock(today: date) -> FixedClock:
    """Clock pinned to ``today``."""
    return FixedClock(today)


@pytest.fixture
def fresh_loan() -> Loan:
    """Loan whose first EMI falls due after ``today``."""
    return create_loan(
        name="Personal Loan",
        principal_amount=500000,
        interest_rate=10,
        tenure=120,
        start_date=date(2024, 6, 20),
        loan_id="loan-fresh",
    )


@pytest.fixture
def running_loan() -> Loan:
    """Loan with six EMIs due by ``today``."""
    return create_loan(
        name="Home Loan",
        principal_amount=1200000,
        interest_rate=9,
        tenure=120,
        start_date=date(2024, 1, 1),
        loan_id="loan-home",
    )


@pytest.fixture
def stuck_loan() -> Loan:
    """Loan whose custom EMI is below the monthly interest."""
    return create_loan(
        name="Underpaid Loan",
        principal_amount=500000,
        interest_rate=12,
        tenure=24,
        start_date=date(2024, 6, 20),
        use_custom_emi=True,
        custom_emi=4000,
        loan_id="loan-stuck",
    )
