"""Pydantic models for aggregated sleep statistics"""
import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from nightlog.models.calendar import DateRange
from nightlog.models.night import QualityTier


class PeriodAggregate(BaseModel):
    """Averages over a filtered set of nights"""

    average_sleep_minutes: float
    average_efficiency_percent: float
    average_feeling: float
    night_count: int = Field(ge=1)


class DailyPoint(BaseModel):
    """One chart point; metric fields are None for days without an entry"""

    date: dt.date
    total_sleep_hours: Optional[float] = None
    efficiency_percent: Optional[int] = None
    feeling_rating: Optional[int] = None

    @property
    def has_entry(self) -> bool:
        return self.total_sleep_hours is not None


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class TrendResult(BaseModel):
    """
    Period-over-period comparison of average sleep

    has_baseline is False when the preceding period had no entries; the
    direction is then reported as flat.
    """

    direction: TrendDirection
    difference_minutes: Optional[float] = None
    has_baseline: bool


class FactorSplit(BaseModel):
    """Nights with a factor vs. nights without it"""

    factor_id: str
    with_factor: PeriodAggregate
    without_factor: PeriodAggregate


class Dashboard(BaseModel):
    """Everything the stats view needs for one period"""

    range: DateRange
    series: list[DailyPoint]
    averages: Optional[PeriodAggregate] = None
    trend: TrendResult
    factor_splits: dict[str, FactorSplit] = Field(default_factory=dict)
    quality: dict[dt.date, QualityTier] = Field(default_factory=dict)
