"""Pydantic value types for wall-clock times and intervals"""
import re
from datetime import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_hhmm(text: str) -> tuple[int, int]:
    """
    Parse a "HH:MM" string into (hour, minute)

    Raises:
        ValueError: If text is not a valid 24-hour time
    """
    match = _HHMM.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise ValueError(f"Invalid time format '{text}'. Expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(f"Invalid time: {text}")
    return hour, minute


class WallClockTime(BaseModel):
    """Time of day without a date (e.g. 23:15)"""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)

    @model_validator(mode="before")
    @classmethod
    def coerce_input(cls, data: Any) -> Any:
        """Accept "HH:MM" strings and datetime.time as well as dicts"""
        if isinstance(data, str):
            hour, minute = parse_hhmm(data)
            return {"hour": hour, "minute": minute}
        if isinstance(data, time):
            return {"hour": data.hour, "minute": data.minute}
        return data

    @classmethod
    def parse(cls, text: str) -> "WallClockTime":
        hour, minute = parse_hhmm(text)
        return cls(hour=hour, minute=minute)

    def as_time(self) -> time:
        return time(self.hour, self.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class Interval(BaseModel):
    """Span between two wall-clock times, possibly crossing midnight"""

    model_config = ConfigDict(frozen=True)

    start: WallClockTime
    end: WallClockTime

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
