"""Tests for due-date rules and payment counting."""

from datetime import date, datetime, timedelta

import pytest

from emi_tracker.engine.schedule import (
    first_due_date,
    next_emi_date,
    next_refresh_date,
    payments_due,
    should_auto_refresh,
)


class TestFirstDueDate:
    """Tests for first_due_date."""

    def test_start_before_due_day(self) -> None:
        assert first_due_date(date(2024, 1, 1)) == date(2024, 1, 5)

    def test_start_on_due_day(self) -> None:
        assert first_due_date(date(2024, 1, 5)) == date(2024, 1, 5)

    def test_start_after_due_day(self) -> None:
        assert first_due_date(date(2024, 1, 6)) == date(2024, 2, 5)

    def test_start_late_december(self) -> None:
        assert first_due_date(date(2023, 12, 20)) == date(2024, 1, 5)


class TestPaymentsDue:
    """Tests for payments_due."""

    def test_started_on_first_three_months_ago(self) -> None:
        """Started on the 1st, checked on the 10th of the third month."""
        assert payments_due(date(2024, 4, 1), date(2024, 6, 10)) == 3

    def test_none_before_first_due(self) -> None:
        assert payments_due(date(2024, 1, 6), date(2024, 2, 4)) == 0

    def test_first_payment_on_due_day(self) -> None:
        assert payments_due(date(2024, 1, 6), date(2024, 2, 5)) == 1

    def test_same_day_start_on_due_day(self) -> None:
        assert payments_due(date(2024, 1, 5), date(2024, 1, 5)) == 1

    def test_before_due_day_counts_previous_month(self) -> None:
        assert payments_due(date(2024, 1, 1), date(2024, 3, 4)) == 2

    def test_across_year_boundary(self) -> None:
        assert payments_due(date(2023, 11, 20), date(2024, 2, 5)) == 3

    def test_clamped_to_tenure(self) -> None:
        assert payments_due(date(2020, 1, 1), date(2024, 6, 10), tenure=12) == 12

    def test_zero_tenure(self) -> None:
        assert payments_due(date(2020, 1, 1), date(2024, 6, 10), tenure=0) == 0

    def test_future_start(self) -> None:
        assert payments_due(date(2025, 1, 1), date(2024, 6, 10)) == 0

    def test_accepts_datetimes(self) -> None:
        assert payments_due(datetime(2024, 4, 1, 9, 30), datetime(2024, 6, 10, 23, 59)) == 3

    @pytest.mark.parametrize("start", [date(2023, 1, 1), date(2023, 1, 5), date(2023, 1, 6), date(2023, 2, 28)])
    def test_monotonic_in_today(self, start: date) -> None:
        previous = 0
        day = start - timedelta(days=10)
        for _ in range(800):
            count = payments_due(start, day)
            assert count >= previous
            previous = count
            day += timedelta(days=1)


class TestNextEmiDate:
    """Tests for next_emi_date."""

    def test_before_due_day(self) -> None:
        assert next_emi_date(date(2024, 6, 4)) == date(2024, 6, 5)

    def test_on_due_day(self) -> None:
        assert next_emi_date(date(2024, 6, 5)) == date(2024, 7, 5)

    def test_year_rollover(self) -> None:
        assert next_emi_date(date(2024, 12, 20)) == date(2025, 1, 5)


class TestAutoRefresh:
    """Tests for should_auto_refresh and next_refresh_date."""

    def test_never_refreshed(self) -> None:
        assert should_auto_refresh(None, date(2024, 6, 1)) is True

    def test_new_month_on_due_day(self) -> None:
        assert should_auto_refresh(date(2024, 5, 5), date(2024, 6, 5)) is True

    def test_new_month_before_due_day(self) -> None:
        assert should_auto_refresh(date(2024, 5, 5), date(2024, 6, 4)) is False

    def test_same_month(self) -> None:
        assert should_auto_refresh(date(2024, 6, 5), date(2024, 6, 28)) is False

    def test_new_year(self) -> None:
        assert should_auto_refresh(datetime(2023, 12, 10, 8, 0), date(2024, 1, 7)) is True

    def test_next_refresh_date(self) -> None:
        assert next_refresh_date(date(2024, 12, 20)) == date(2025, 1, 5)
