"""Calendar rules for the fixed monthly due day.

Every EMI falls due on the 5th of the month. A loan started on or before
the 5th owes its first EMI that same month, otherwise on the 5th of the
following month.
"""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

DUE_DAY = 5


def as_date(value: date | datetime) -> date:
    """Drop the time part of a ``datetime``."""
    if isinstance(value, datetime):
        return value.date()
    return value


def months_between(later: date, earlier: date) -> int:
    """Whole calendar months from ``earlier`` to ``later``."""
    delta = relativedelta(later, earlier)
    return delta.years * 12 + delta.months


def first_due_date(start_date: date | datetime) -> date:
    """Due date of the first EMI for a loan started on ``start_date``."""
    start = as_date(start_date)
    first_due = start.replace(day=DUE_DAY)
    if start.day > DUE_DAY:
        first_due += relativedelta(months=1)
    return first_due


def last_due_anchor(today: date | datetime) -> date:
    """Most recent due date on or before ``today``."""
    today = as_date(today)
    anchor = today.replace(day=DUE_DAY)
    if today.day < DUE_DAY:
        anchor -= relativedelta(months=1)
    return anchor


def payments_due(
    start_date: date | datetime,
    today: date | datetime,
    tenure: int | None = None,
) -> int:
    """Count the EMIs that have fallen due by ``today``.

    Parameters
    ----------
    start_date : date | datetime
        Loan origination date.
    today : date | datetime
        Reference day.
    tenure : int | None
        Upper bound for the count, when given.

    Returns
    -------
    int
        Payments due, never negative and never above ``tenure``.
    """
    today = as_date(today)
    first_due = first_due_date(start_date)
    if today < first_due:
        return 0

    count = months_between(last_due_anchor(today), first_due) + 1
    if tenure is not None:
        count = min(count, tenure)
    return max(0, count)


def next_emi_date(today: date | datetime) -> date:
    """Next due date strictly after the current billing anchor."""
    today = as_date(today)
    next_due = today.replace(day=DUE_DAY)
    if today.day >= DUE_DAY:
        next_due += relativedelta(months=1)
    return next_due


def should_auto_refresh(last_refresh: date | datetime | None, today: date | datetime) -> bool:
    """Whether derived figures should be refreshed for a new billing month."""
    if last_refresh is None:
        return True
    today = as_date(today)
    last = as_date(last_refresh)
    return (today.year, today.month) > (last.year, last.month) and today.day >= DUE_DAY


def next_refresh_date(today: date | datetime) -> date:
    """Due day of the month after ``today``."""
    return as_date(today).replace(day=DUE_DAY) + relativedelta(months=1)
