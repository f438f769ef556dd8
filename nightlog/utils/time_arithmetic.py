"""
Wall-clock time arithmetic

Converts "HH:MM" style times of day into minutes since midnight and computes
elapsed minutes between two of them. An end time that is not after its start
time is taken to fall on the following day (midnight rollover), so equal
times are a full 24 hours apart.
"""

import logging
from datetime import time
from typing import Union

from nightlog.models.clock import Interval, WallClockTime

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

ClockLike = Union[WallClockTime, time, str]


def parse_wall_clock(text: str) -> WallClockTime:
    """
    Parse time string (HH:MM format) to WallClockTime

    Args:
        text: Time string in HH:MM format (e.g., "23:15")

    Returns:
        WallClockTime

    Raises:
        ValueError: If text is not in HH:MM format or out of range
    """
    return WallClockTime.parse(text)


def as_wall_clock(value: ClockLike) -> WallClockTime:
    """Coerce a WallClockTime, datetime.time or "HH:MM" string"""
    if isinstance(value, WallClockTime):
        return value
    if isinstance(value, time):
        return WallClockTime(hour=value.hour, minute=value.minute)
    if isinstance(value, str):
        return parse_wall_clock(value)
    raise TypeError(f"Expected WallClockTime, time or str, got {type(value).__name__}")


def to_minutes(t: ClockLike) -> int:
    """Minutes since midnight, in [0, 1439]"""
    t = as_wall_clock(t)
    return t.hour * 60 + t.minute


def from_minutes(minutes: int) -> WallClockTime:
    """Inverse of to_minutes; values outside a day wrap around"""
    minutes %= MINUTES_PER_DAY
    return WallClockTime(hour=minutes // 60, minute=minutes % 60)


def elapsed_minutes(start: ClockLike, end: ClockLike) -> int:
    """
    Minutes from start to end, rolling end into the next day when needed

    An end that is equal to or earlier than start belongs to the following
    day, so the result is always in [1, 1440] and equal times give 1440.

    Example:
        >>> elapsed_minutes("23:45", "00:15")
        30
    """
    s = to_minutes(start)
    e = to_minutes(end)
    if e <= s:
        e += MINUTES_PER_DAY
    return e - s


def interval_minutes(interval: Interval) -> int:
    return elapsed_minutes(interval.start, interval.end)
