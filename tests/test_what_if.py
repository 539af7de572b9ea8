"""Tests for part-payment savings estimates."""

from dataclasses import replace
from datetime import date

import pytest

from emi_tracker.engine.resolver import resolve_loan
from emi_tracker.engine.what_if import part_payment_savings
from emi_tracker.models.loan import Loan


class TestPartPaymentSavings:
    """Tests for part_payment_savings."""

    def test_positive_savings(self, fresh_loan: Loan, today: date) -> None:
        savings = part_payment_savings(fresh_loan, 50000, today)
        total = resolve_loan(fresh_loan, today).total_interest

        assert 0 < savings < total

    def test_full_payoff_saves_all_interest(self, fresh_loan: Loan, today: date) -> None:
        total = resolve_loan(fresh_loan, today).total_interest

        assert part_payment_savings(fresh_loan, 500000, today) == pytest.approx(total)
        assert part_payment_savings(fresh_loan, 900000, today) == pytest.approx(total)

    def test_larger_payment_saves_more(self, running_loan: Loan, today: date) -> None:
        amounts = [10000, 50000, 100000, 500000]
        savings = [part_payment_savings(running_loan, amount, today) for amount in amounts]

        assert savings == sorted(savings)

    def test_zero_payment_saves_nothing(self, fresh_loan: Loan, today: date) -> None:
        assert part_payment_savings(fresh_loan, 0, today) == pytest.approx(0)

    def test_cleared_loan_saves_nothing(self, fresh_loan: Loan, today: date) -> None:
        loan = replace(fresh_loan, current_principal=0)

        assert part_payment_savings(loan, 50000, today) == 0

    def test_does_not_touch_loan(self, fresh_loan: Loan, today: date) -> None:
        before = replace(fresh_loan)
        part_payment_savings(fresh_loan, 50000, today)

        assert fresh_loan == before
        assert fresh_loan.part_payments == []
