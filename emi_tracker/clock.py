"""Injectable source of "today".

Engine functions take ``today`` as an argument. The store and scripts ask a
``Clock`` for it so tests can pin the calendar with ``FixedClock``.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone


class Clock(ABC):
    """Abstract clock interface."""

    @abstractmethod
    def today(self) -> date:
        """Get the current calendar date."""
        ...

    @abstractmethod
    def now(self) -> datetime:
        """Get the current timezone-aware time."""
        ...


class SystemClock(Clock):
    """Production clock reading the wall clock."""

    def today(self) -> date:
        return date.today()

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Test clock pinned to a given date.

    Parameters
    ----------
    fixed_date : date
        Date returned by ``today()`` until ``advance()`` or ``set_date()``.
    """

    def __init__(self, fixed_date: date) -> None:
        self._date = fixed_date

    def today(self) -> date:
        return self._date

    def now(self) -> datetime:
        return datetime(self._date.year, self._date.month, self._date.day, 12, 0, tzinfo=timezone.utc)

    def set_date(self, new_date: date) -> None:
        """Move the clock to a specific date."""
        self._date = new_date

    def advance(self, days: int = 1) -> None:
        """Advance the clock by whole days."""
        self._date = self._date + timedelta(days=days)
