"""Pydantic models for calendar display cells and date ranges"""
import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class DateRange(BaseModel):
    """Inclusive range of calendar dates"""

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end

    @property
    def length_days(self) -> int:
        """Number of days covered; 0 when start is after end"""
        return max(0, (self.end - self.start).days + 1)


class CalendarDay(BaseModel):
    """Single cell of a month grid"""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    day_of_month: int = Field(ge=1, le=31)
    in_target_month: bool
