"""Unit tests for time arithmetic (nightlog/utils/time_arithmetic.py)"""
import pytest
from datetime import time

from nightlog.models.clock import Interval, WallClockTime
from nightlog.utils.time_arithmetic import (
    MINUTES_PER_DAY,
    as_wall_clock,
    elapsed_minutes,
    from_minutes,
    interval_minutes,
    parse_wall_clock,
    to_minutes,
)

ALL_HOURS = range(0, 24)
SAMPLE_MINUTES = (0, 1, 15, 30, 59)


# ============================================================================
# Parsing Tests
# ============================================================================

def test_parse_wall_clock_valid():
    """Test parsing a valid 24-hour time string"""
    result = parse_wall_clock("23:15")

    assert result.hour == 23
    assert result.minute == 15


def test_parse_wall_clock_single_digit_hour():
    """Test that "7:05" is accepted"""
    result = parse_wall_clock("7:05")

    assert result == WallClockTime(hour=7, minute=5)
    assert str(result) == "07:05"


@pytest.mark.parametrize("text", ["24:00", "12:60", "25:61", "ab:cd", "1230", "", "12:5", "-1:30"])
def test_parse_wall_clock_rejects_malformed(text):
    """Test that malformed or out-of-range times fail fast"""
    with pytest.raises(ValueError):
        parse_wall_clock(text)


def test_as_wall_clock_accepts_time_and_string():
    """Test coercion from datetime.time and "HH:MM" strings"""
    assert as_wall_clock(time(6, 45)) == WallClockTime(hour=6, minute=45)
    assert as_wall_clock("06:45") == WallClockTime(hour=6, minute=45)


def test_as_wall_clock_rejects_other_types():
    with pytest.raises(TypeError):
        as_wall_clock(645)


# ============================================================================
# Minutes Conversion Tests
# ============================================================================

def test_to_minutes_bounds():
    """Test midnight and the last minute of the day"""
    assert to_minutes("00:00") == 0
    assert to_minutes("23:59") == 1439


def test_to_minutes_then_back_reproduces_time():
    """Test round trip through minutes since midnight"""
    for hour in ALL_HOURS:
        for minute in SAMPLE_MINUTES:
            original = WallClockTime(hour=hour, minute=minute)
            assert from_minutes(to_minutes(original)) == original


def test_from_minutes_wraps_past_midnight():
    assert from_minutes(MINUTES_PER_DAY + 30) == WallClockTime(hour=0, minute=30)


# ============================================================================
# Elapsed Minutes Tests
# ============================================================================

def test_elapsed_minutes_same_day():
    assert elapsed_minutes("22:30", "23:00") == 30


def test_elapsed_minutes_across_midnight():
    """Test that an earlier end time rolls over to the next day"""
    assert elapsed_minutes("23:45", "00:15") == 30
    assert elapsed_minutes("22:30", "07:00") == 510


def test_elapsed_minutes_equal_times_is_full_day():
    """Test that equal start and end are a full 24 hours apart"""
    for hour in ALL_HOURS:
        for minute in SAMPLE_MINUTES:
            t = WallClockTime(hour=hour, minute=minute)
            assert elapsed_minutes(t, t) == MINUTES_PER_DAY


def test_elapsed_minutes_always_in_range():
    """Test result stays within [0, 2880) for a grid of time pairs"""
    points = [WallClockTime(hour=h, minute=m) for h in ALL_HOURS for m in (0, 30, 59)]
    for start in points:
        for end in points:
            result = elapsed_minutes(start, end)
            assert 0 <= result < 2 * MINUTES_PER_DAY


def test_interval_minutes():
    """Test elapsed minutes for an Interval value"""
    interval = Interval(start="03:15", end="03:35")

    assert interval_minutes(interval) == 20
