"""Global test fixtures and utilities for nightlog tests"""
import pytest
from datetime import date, timedelta

from nightlog.models.night import NightRecord


# ============================================================================
# Reference Date Fixtures
# ============================================================================

@pytest.fixture
def today():
    """Fixed reference date (a Sunday)"""
    return date(2024, 3, 10)


# ============================================================================
# Record Fixtures
# ============================================================================

@pytest.fixture
def make_record():
    """Factory for NightRecord with sensible defaults"""
    def _make(
        day: date,
        bedtime: str = "22:30",
        sleep_onset: str = "23:00",
        wake_time: str = "07:00",
        interruptions=None,
        nap_minutes=None,
        feeling_rating: int = 4,
        factor_values=None,
    ) -> NightRecord:
        return NightRecord(
            date=day,
            bedtime=bedtime,
            sleep_onset=sleep_onset,
            wake_time=wake_time,
            interruptions=interruptions or [],
            nap_minutes=nap_minutes or [],
            feeling_rating=feeling_rating,
            factor_values=factor_values or {},
        )
    return _make


@pytest.fixture
def raw_entry():
    """Raw entry in the stored (camelCase) format"""
    return {
        "id": "lq2x8k3m9",
        "date": "2024-03-09",
        "bedtime": "22:30",
        "sleepTime": "23:00",
        "wakeTime": "07:00",
        "nightWakings": [{"id": "w1", "start": "03:15", "end": "03:35"}],
        "napStart": "14:00",
        "napEnd": "14:25",
        "drinks": 2,
        "weed": False,
        "insights": True,
        "feeling": 4,
        "notes": "Woke up once",
        "createdAt": "2024-03-10T07:05:00.000Z",
        "updatedAt": "2024-03-10T07:05:00.000Z",
    }


@pytest.fixture
def week_of_records(make_record, today):
    """Seven nights ending today, 8h asleep each, alternating drinks"""
    return [
        make_record(
            today - timedelta(days=offset),
            factor_values={"alc_drinks": offset % 2, "screens_off": True},
        )
        for offset in range(7)
    ]
