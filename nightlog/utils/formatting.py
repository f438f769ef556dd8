"""Display formatting for durations, percentages, ratings and dates"""
import math
from datetime import date

FEELING_LABELS = {
    1: "Terrible",
    2: "Poor",
    3: "OK",
    4: "Good",
    5: "Great",
}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3), unlike Python's round()"""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_duration(minutes: float) -> str:
    """
    Format minutes as a short duration, e.g. "7h 30m", "8h", "45m"

    Zero and negative durations are shown as "0m".
    """
    if minutes <= 0:
        return "0m"
    hours = math.floor(minutes / 60)
    mins = int(round_half_up(minutes % 60))
    if mins == 60:
        hours, mins = hours + 1, 0
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_efficiency(percent: float) -> str:
    return f"{int(round_half_up(percent))}%"


def feeling_label(rating: int) -> str:
    """Word for a 1-5 feeling rating; empty string if out of range"""
    return FEELING_LABELS.get(rating, "")


def format_short_date(day: date) -> str:
    """e.g. "Mar 5" """
    return f"{day.strftime('%b')} {day.day}"


def format_display_date(day: date) -> str:
    """e.g. "Tue, Mar 5" """
    return f"{day.strftime('%a')}, {format_short_date(day)}"


def format_month_year(year: int, month_index: int) -> str:
    """e.g. "February 2024" for (2024, 1); month_index is zero-based"""
    return date(year, month_index + 1, 1).strftime("%B %Y")
