"""Pure calendar arithmetic used by the view projector.

All comparisons work on calendar components (year, month, day) so that
datetimes carrying a time of day or an offset never miss their date.
Weeks start on Monday (ISO-8601).
"""

import math
from datetime import date, datetime, timedelta
from typing import List, Tuple, Union

DateLike = Union[date, datetime]

DAY_NAMES: Tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SECONDS_PER_DAY = 24 * 60 * 60


def as_date(value: DateLike) -> date:
    """Drop the time component of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def same_day(first: DateLike, second: DateLike) -> bool:
    """True when both values fall on the same calendar date."""
    return (
        first.year == second.year
        and first.month == second.month
        and first.day == second.day
    )


def week_start(day: DateLike) -> date:
    """Monday on or before day (a Sunday goes back six days)."""
    day = as_date(day)
    return day - timedelta(days=day.weekday())


def iso_week_number(day: DateLike) -> int:
    """ISO-8601 week number.

    The week belongs to the year holding its Thursday, so 2024-12-30 is
    week 1 and 2021-01-03 is week 53.
    """
    return as_date(day).isocalendar()[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of a month.

    Raises:
        ValueError: If month is outside 1..12.
    """
    first = date(year, month, 1)
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    return first, next_month - timedelta(days=1)


def days_from(start: DateLike, count: int) -> List[date]:
    """count consecutive dates beginning at start."""
    start = as_date(start)
    return [start + timedelta(days=offset) for offset in range(count)]


def month_grid(year: int, month: int) -> List[List[date]]:
    """Monday-first calendar grid covering a month.

    The first row begins on the Monday on or before day 1; rows of seven
    days are added while the row start is still inside (or before) the
    month, so the last row is the one holding the month's last day.

    Returns:
        List of weeks, each a list of seven dates.
    """
    month_start, month_end = month_bounds(year, month)
    weeks: List[List[date]] = []
    cursor = week_start(month_start)
    while cursor <= month_end:
        weeks.append(days_from(cursor, 7))
        cursor += timedelta(days=7)
    return weeks


def day_name(day: DateLike) -> str:
    """English weekday name, independent of locale."""
    return DAY_NAMES[as_date(day).weekday()]


def month_name(month: int) -> str:
    """English month name for month 1..12.

    Raises:
        ValueError: If month is outside 1..12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    return MONTH_NAMES[month - 1]


def inclusive_day_span(start: DateLike, end: DateLike) -> int:
    """Days covered from start through end, both included.

    Partial days round up: ceil((end - start) / 1 day) + 1.
    """
    delta = end - start
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY) + 1
