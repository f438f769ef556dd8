"""Pydantic models for nightly sleep entries and their derived metrics"""
import datetime as dt
from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    model_validator,
)

from nightlog.models.clock import Interval, WallClockTime
from nightlog.utils.time_arithmetic import elapsed_minutes

# Older entries stored these lifestyle answers as top-level fields
LEGACY_FACTOR_FIELDS = {
    "drinks": "alc_drinks",
    "weed": "weed",
    "insights": "insights",
}

FactorValue = Union[bool, NonNegativeInt]


class FactorDefinition(BaseModel):
    """User-defined lifestyle factor tracked alongside each night"""

    id: str = Field(min_length=1)
    label: str
    type: Literal["boolean", "integer"]
    max: Optional[int] = Field(None, ge=0)  # integers only

    @model_validator(mode="after")
    def max_only_for_integers(self) -> "FactorDefinition":
        if self.type == "boolean" and self.max is not None:
            raise ValueError(f"Boolean factor '{self.id}' cannot have a max")
        return self


DEFAULT_FACTORS: list[FactorDefinition] = [
    FactorDefinition(id="alc_drinks", label="Alcohol", type="integer", max=15),
    FactorDefinition(id="coffee", label="Coffee", type="integer", max=10),
    FactorDefinition(id="screens_off", label="Screens off 1hr", type="boolean"),
]

# Factors folded in from LEGACY_FACTOR_FIELDS that have no default definition
LEGACY_FACTORS: list[FactorDefinition] = [
    FactorDefinition(id="weed", label="Weed", type="boolean"),
    FactorDefinition(id="insights", label="Other", type="boolean"),
]


class NapDurations(BaseModel):
    """Naps entered as a list of durations"""

    kind: Literal["durations"] = "durations"
    minutes: list[NonNegativeInt] = Field(default_factory=list)

    def total_minutes(self) -> int:
        return sum(self.minutes)


class NapWindow(BaseModel):
    """Single nap entered as start/end times"""

    kind: Literal["window"] = "window"
    window: Interval

    def total_minutes(self) -> int:
        return elapsed_minutes(self.window.start, self.window.end)


def _nap_entry_minutes(entry: Any) -> Any:
    if isinstance(entry, dict):
        return entry.get("minutes")
    return entry


def resolve_nap_minutes(
    naps: Optional[list[Any]] = None,
    nap_start: Optional[Any] = None,
    nap_end: Optional[Any] = None,
) -> list[int]:
    """
    Reduce both nap input modes to a canonical list of nap minutes

    A non-empty duration list wins over the start/end pair; the start/end
    pair is only used when both ends are present.

    Args:
        naps: Durations as ints or {"minutes": n} dicts
        nap_start: Nap start time (WallClockTime, time or "HH:MM")
        nap_end: Nap end time

    Returns:
        List of nap durations in minutes
    """
    if naps is not None and not isinstance(naps, (list, tuple)):
        raise ValueError(f"naps must be a list, got {type(naps).__name__}")
    if naps:
        durations = NapDurations(minutes=[_nap_entry_minutes(n) for n in naps])
        return list(durations.minutes)
    if nap_start and nap_end:
        nap = NapWindow(window=Interval(start=nap_start, end=nap_end))
        return [nap.total_minutes()]
    return []


def _pop_first(data: dict, *keys: str) -> Any:
    value = None
    for key in keys:
        if key in data:
            popped = data.pop(key)
            if value is None:
                value = popped
    return value


class NightRecord(BaseModel):
    """
    One night's entry, keyed by the date of going to bed

    Wake time, naps and interruptions may fall on the following day.
    Raw entries in the storage format (camelCase keys, legacy nap start/end
    and legacy factor fields) are accepted and normalised on validation.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    date: dt.date
    bedtime: WallClockTime
    sleep_onset: WallClockTime = Field(
        validation_alias=AliasChoices("sleep_onset", "sleepOnset", "sleepTime", "sleep_time")
    )
    wake_time: WallClockTime = Field(validation_alias=AliasChoices("wake_time", "wakeTime"))
    interruptions: list[Interval] = Field(
        default_factory=list,
        validation_alias=AliasChoices("interruptions", "nightWakings", "night_wakings"),
    )
    nap_minutes: list[NonNegativeInt] = Field(default_factory=list)
    feeling_rating: int = Field(
        ge=1, le=5, validation_alias=AliasChoices("feeling_rating", "feelingRating", "feeling")
    )
    factor_values: dict[str, FactorValue] = Field(default_factory=dict)
    notes: str = ""

    @model_validator(mode="before")
    @classmethod
    def resolve_raw_fields(cls, data: Any) -> Any:
        """Fold nap inputs into nap_minutes and legacy fields into factor_values"""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        naps = _pop_first(data, "naps")
        nap_start = _pop_first(data, "nap_start", "napStart")
        nap_end = _pop_first(data, "nap_end", "napEnd")
        if "nap_minutes" not in data:
            data["nap_minutes"] = resolve_nap_minutes(naps, nap_start, nap_end)

        raw_factors = _pop_first(data, "factor_values", "factorValues") or {}
        if not isinstance(raw_factors, Mapping):
            raise ValueError(f"factor_values must be a mapping, got {type(raw_factors).__name__}")
        factors = dict(raw_factors)
        for legacy_key, factor_id in LEGACY_FACTOR_FIELDS.items():
            if legacy_key in data:
                value = data.pop(legacy_key)
                if value is not None:
                    factors.setdefault(factor_id, value)
        data["factor_values"] = factors
        return data

    @property
    def total_nap_minutes(self) -> int:
        return sum(self.nap_minutes)


class NightMetrics(BaseModel):
    """Metrics derived from a NightRecord; recomputed on demand, never stored"""

    model_config = ConfigDict(frozen=True)

    time_in_bed_minutes: int = Field(ge=0)
    sleep_latency_minutes: int = Field(ge=0)
    interruption_minutes: int = Field(ge=0)
    total_sleep_minutes: int = Field(ge=0)
    sleep_efficiency_percent: float = Field(ge=0)
    nap_minutes: int = Field(ge=0)
    adjusted_total_minutes: int = Field(ge=0)


class QualityTier(str, Enum):
    GOOD = "good"
    OK = "ok"
    POOR = "poor"
