"""Tests for the amortization simulator."""

import pytest

from emi_tracker.engine.amortization import (
    MAX_AMORTIZATION_MONTHS,
    amortization_step,
    forward_apply,
    iter_schedule,
    remaining_months,
    size_tenure,
)
from emi_tracker.engine.emi import calculate_emi
from emi_tracker.models.enums import SizingStatus


class TestAmortizationStep:
    """Tests for amortization_step."""

    def test_splits_payment(self) -> None:
        step = amortization_step(100000, 2000, 0.01)

        assert step.interest == pytest.approx(1000)
        assert step.principal_portion == pytest.approx(1000)
        assert step.balance == pytest.approx(99000)
        assert not step.is_stuck

    def test_payment_below_interest(self) -> None:
        step = amortization_step(100000, 500, 0.01)

        assert step.principal_portion == 0
        assert step.balance == 100000
        assert step.is_stuck

    def test_balance_floored_at_zero(self) -> None:
        step = amortization_step(300, 1000, 0.01)

        assert step.balance == 0


class TestIterSchedule:
    """Tests for iter_schedule."""

    def test_numbers_months_from_one(self) -> None:
        steps = list(iter_schedule(100000, 2000, 0.01, 3))

        assert [s.month for s in steps] == [1, 2, 3]

    def test_stops_after_stuck_step(self) -> None:
        steps = list(iter_schedule(100000, 500, 0.01, 12))

        assert len(steps) == 1
        assert steps[0].interest == pytest.approx(1000)

    def test_keeps_going_when_stuck_allowed(self) -> None:
        steps = list(iter_schedule(100000, 500, 0.01, 12, stop_when_stuck=False))

        assert len(steps) == 12
        assert all(s.principal_portion == 0 for s in steps)

    def test_no_steps_without_payment(self) -> None:
        assert list(iter_schedule(100000, 0, 0.01, 12)) == []

    def test_no_steps_without_balance(self) -> None:
        assert list(iter_schedule(0, 2000, 0.01, 12)) == []

    def test_stops_when_cleared(self) -> None:
        steps = list(iter_schedule(1000, 600, 0.01, 12))

        assert len(steps) == 2
        assert steps[-1].balance == 0


class TestForwardApply:
    """Tests for forward_apply."""

    def test_sums_interest(self) -> None:
        run = forward_apply(1000, 600, 0.01, 12)

        assert run.months_applied == 2
        assert run.total_interest == pytest.approx(10 + 4.1)
        assert run.balance == 0
        assert run.stuck is False

    def test_zero_months(self) -> None:
        run = forward_apply(1000, 600, 0.01, 0)

        assert run.balance == 1000
        assert run.months_applied == 0
        assert run.total_interest == 0

    def test_reports_stuck(self) -> None:
        run = forward_apply(100000, 500, 0.01, 12)

        assert run.stuck is True
        assert run.balance == 100000


class TestSizeTenure:
    """Tests for size_tenure and remaining_months."""

    def test_formula_emi_sizes_to_tenure(self) -> None:
        emi = calculate_emi(1200000, 9, 120)
        sizing = size_tenure(1200000, emi, 9)

        assert sizing.status == SizingStatus.AMORTIZES
        assert sizing.months == 120
        assert sizing.is_sizable

    def test_custom_emi_below_interest_cannot_amortize(self) -> None:
        """500K at 12% accrues 5K a month; a 4K EMI never pays it down."""
        sizing = size_tenure(500000, 4000, 12)

        assert sizing.status == SizingStatus.CANNOT_AMORTIZE
        assert sizing.months == 0
        assert not sizing.is_sizable
        assert remaining_months(500000, 4000, 12) == 0

    def test_zero_emi_cannot_amortize(self) -> None:
        assert size_tenure(500000, 0, 12).status == SizingStatus.CANNOT_AMORTIZE

    def test_nothing_outstanding(self) -> None:
        sizing = size_tenure(0, 4000, 12)

        assert sizing.status == SizingStatus.PAID_OFF
        assert sizing.months == 0

    def test_capped_at_safety_bound(self) -> None:
        """A payment barely above interest needs more than 100 years."""
        sizing = size_tenure(100000, 501, 6)

        assert sizing.status == SizingStatus.EXCEEDS_CAP
        assert sizing.months == MAX_AMORTIZATION_MONTHS
        assert remaining_months(100000, 501, 6) == MAX_AMORTIZATION_MONTHS

    def test_custom_cap(self) -> None:
        sizing = size_tenure(100000, 1000.5, 12, max_months=100)

        assert sizing.status == SizingStatus.EXCEEDS_CAP
        assert sizing.months == 100

    def test_zero_rate(self) -> None:
        assert remaining_months(12000, 1000, 0) == 12

    def test_malformed_inputs(self) -> None:
        assert remaining_months("abc", 1000, 9) == 0
        assert remaining_months(12000, None, 9) == 0
