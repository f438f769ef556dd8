"""
Calendar and date-range utilities

Pure date helpers for windowing and display:
1. Day arithmetic and inclusive range enumeration
2. Week / month range presets ending on a given day
3. Sunday-first month grids padded to whole weeks

Nothing here reads the system clock: every function that needs "today"
takes it as an argument.
"""

import calendar
import logging
from datetime import date, datetime, timedelta

from nightlog.models.calendar import CalendarDay, DateRange

logger = logging.getLogger(__name__)

WEEK_DAYS = 7
MONTH_DAYS = 30

_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


def parse_date(date_str: str) -> date:
    """
    Parse an ISO date string (YYYY-MM-DD) to a date object

    Raises:
        ValueError: If date_str is not a valid ISO date
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date format '{date_str}'. Expected YYYY-MM-DD") from e


def to_date_string(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative if end is earlier)"""
    return (end - start).days


def days_in_range(start: date, end: date) -> list[date]:
    """
    Every date from start to end inclusive, ascending

    Returns an empty list when start is after end.
    """
    if start > end:
        return []
    return [add_days(start, offset) for offset in range(days_between(start, end) + 1)]


def range_ending(today: date, length_days: int) -> DateRange:
    """Range of length_days days ending on today (inclusive)"""
    if length_days < 1:
        raise ValueError(f"Range length must be at least 1 day (got {length_days})")
    return DateRange(start=add_days(today, -(length_days - 1)), end=today)


def week_range(today: date) -> DateRange:
    """Last 7 days ending today"""
    return range_ending(today, WEEK_DAYS)


def month_range(today: date) -> DateRange:
    """Last 30 days ending today"""
    return range_ending(today, MONTH_DAYS)


def previous_range(current: DateRange) -> DateRange:
    """The range of equal length immediately before current"""
    length = days_between(current.start, current.end) + 1
    return DateRange(start=add_days(current.start, -length), end=add_days(current.start, -1))


def month_grid(year: int, month_index: int) -> list[CalendarDay]:
    """
    Sunday-first calendar grid for a month, padded to whole weeks

    Leading cells are the last days of the previous month and trailing
    cells the first days of the next month; both carry real dates with
    in_target_month=False.

    Args:
        year: Four-digit year
        month_index: Zero-based month (0 = January, 11 = December)

    Returns:
        List of CalendarDay whose length is a multiple of 7
    """
    if not 0 <= month_index <= 11:
        raise ValueError(f"month_index must be in 0-11 (got {month_index})")

    month = month_index + 1
    return [
        CalendarDay(date=day, day_of_month=day.day, in_target_month=day.month == month)
        for day in _SUNDAY_FIRST.itermonthdates(year, month)
    ]


def shift_month(year: int, month_index: int, delta: int) -> tuple[int, int]:
    """Move a (year, zero-based month) pair by delta months"""
    total = year * 12 + month_index + delta
    return total // 12, total % 12


def is_today(day: date, today: date) -> bool:
    return day == today


def is_future_date(day: date, today: date) -> bool:
    return day > today
