"""Calendar helpers for month-windowed reports."""

import calendar
from collections.abc import Mapping
from datetime import date, datetime
from typing import cast
from dateutil.relativedelta import relativedelta

from modactivity.exceptions import ValidationError

MIN_YEAR = 1970
# Leaves room for the start of the following month to be representable
MAX_YEAR = 9998


def resolve_period(
    year: int | None, month: int | None, today: date | None = None
) -> tuple[int, int]:
    """
    Fill in a missing year and/or month from the current date.

    Parameters:
        year: Requested year, or None for the current year.
        month: Requested month (1-12), or None for the current month.
        today: Reference date; defaults to `date.today()` (server local time).

    Returns:
        tuple[int, int]: The resolved (year, month).
    """
    today = today or date.today()
    return (
        year if year is not None else today.year,
        month if month is not None else today.month,
    )


def validate_period(year: int, month: int) -> None:
    """
    Reject a (year, month) pair that cannot be reported on.

    Raises:
        ValidationError: If `month` is outside 1-12 or `year` is outside MIN_YEAR-MAX_YEAR.
    """
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12", field="month")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}", field="year"
        )


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """
    Return the half-open window [start of month, start of next month).

    Queries must use `>= start` and `< end` so an event stamped exactly at
    midnight on the first of the next month is never counted twice.
    """
    start = datetime(year, month, 1)
    end = cast(datetime, start + relativedelta(months=1))
    return start, end


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def densify(counts: Mapping[int, int], days: int) -> list[int]:
    """
    Expand a sparse day -> count mapping into one entry per day.

    Parameters:
        counts: Counts keyed by day of month (1-based); absent days count as 0.
        days: Number of days in the month.

    Returns:
        list[int]: `days` counts, index 0 being day 1.
    """
    return [counts.get(day, 0) for day in range(1, days + 1)]
