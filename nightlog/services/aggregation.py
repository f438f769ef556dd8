"""
Aggregation of nights over date ranges

Produces the data behind the stats view:
- Per-day chart series with gaps preserved
- Period averages (None for an empty period, never a made-up zero)
- Period-over-period trend of average sleep
- Factor splits: nights with a lifestyle factor vs. nights without it

Records may arrive in any order; everything here filters and sorts itself.
"""

import logging
from typing import Callable, Iterable, Optional

from nightlog.models.aggregate import (
    DailyPoint,
    FactorSplit,
    PeriodAggregate,
    TrendDirection,
    TrendResult,
)
from nightlog.models.calendar import DateRange
from nightlog.models.night import FactorDefinition, NightRecord
from nightlog.services.night_metrics import calculate_metrics
from nightlog.utils.calendar_utils import days_in_range, previous_range
from nightlog.utils.formatting import round_half_up

logger = logging.getLogger(__name__)

# Difference in average sleep (minutes) needed to call a trend up or down
TREND_THRESHOLD_MINUTES = 15


def filter_records(records: Iterable[NightRecord], date_range: DateRange) -> list[NightRecord]:
    """Records dated within the range (inclusive), sorted by date"""
    return sorted(
        (r for r in records if date_range.start <= r.date <= date_range.end),
        key=lambda r: r.date,
    )


def daily_series(records: Iterable[NightRecord], date_range: DateRange) -> list[DailyPoint]:
    """
    One chart point per day in the range

    Sleep hours are rounded to one decimal and efficiency to a whole
    percent. Days without an entry yield a point with all metrics None so
    charts can draw the gap.
    """
    by_date = {r.date: r for r in filter_records(records, date_range)}

    series = []
    for day in days_in_range(date_range.start, date_range.end):
        record = by_date.get(day)
        if record is None:
            series.append(DailyPoint(date=day))
            continue
        metrics = calculate_metrics(record)
        series.append(DailyPoint(
            date=day,
            total_sleep_hours=round_half_up(metrics.total_sleep_minutes / 60, 1),
            efficiency_percent=int(round_half_up(metrics.sleep_efficiency_percent)),
            feeling_rating=record.feeling_rating,
        ))
    return series


def summarize(records: list[NightRecord]) -> Optional[PeriodAggregate]:
    """Averages over the given nights, or None if there are none"""
    if not records:
        return None

    metrics = [calculate_metrics(r) for r in records]
    count = len(records)
    return PeriodAggregate(
        average_sleep_minutes=sum(m.total_sleep_minutes for m in metrics) / count,
        average_efficiency_percent=sum(m.sleep_efficiency_percent for m in metrics) / count,
        average_feeling=sum(r.feeling_rating for r in records) / count,
        night_count=count,
    )


def period_averages(
    records: Iterable[NightRecord], date_range: DateRange
) -> Optional[PeriodAggregate]:
    return summarize(filter_records(records, date_range))


def trend(records: Iterable[NightRecord], date_range: DateRange) -> TrendResult:
    """
    Compare average sleep with the preceding period of equal length

    Logic:
    - difference > +15 min: up
    - difference < -15 min: down
    - otherwise flat
    - no entries in either period: flat, with has_baseline=False when the
      preceding period is the empty one
    """
    records = list(records)
    current = period_averages(records, date_range)
    baseline = period_averages(records, previous_range(date_range))

    if baseline is None:
        logger.debug(f"No entries before {date_range.start}, trend has no baseline")
        return TrendResult(direction=TrendDirection.FLAT, has_baseline=False)
    if current is None:
        return TrendResult(direction=TrendDirection.FLAT, has_baseline=True)

    diff = current.average_sleep_minutes - baseline.average_sleep_minutes
    if diff > TREND_THRESHOLD_MINUTES:
        direction = TrendDirection.UP
    elif diff < -TREND_THRESHOLD_MINUTES:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.FLAT

    return TrendResult(direction=direction, difference_minutes=diff, has_baseline=True)


def trend_direction(records: Iterable[NightRecord], date_range: DateRange) -> TrendDirection:
    return trend(records, date_range).direction


def has_factor(record: NightRecord, factor_id: str) -> bool:
    """True for a boolean factor set to True or a count above zero"""
    value = record.factor_values.get(factor_id)
    if isinstance(value, bool):
        return value
    return value is not None and value > 0


def split_by(
    records: Iterable[NightRecord],
    predicate: Callable[[NightRecord], bool],
) -> tuple[list[NightRecord], list[NightRecord]]:
    """Partition records into (matching, not matching)"""
    matching, rest = [], []
    for record in records:
        (matching if predicate(record) else rest).append(record)
    return matching, rest


def factor_split(
    records: Iterable[NightRecord],
    date_range: DateRange,
    factor_id: str,
) -> Optional[FactorSplit]:
    """
    Averages for nights with vs. without a factor

    Returns None unless both groups have at least one night.
    """
    with_group, without_group = split_by(
        filter_records(records, date_range),
        lambda r: has_factor(r, factor_id),
    )
    if not with_group or not without_group:
        logger.debug(
            f"Suppressing split for '{factor_id}': "
            f"{len(with_group)} with, {len(without_group)} without"
        )
        return None

    return FactorSplit(
        factor_id=factor_id,
        with_factor=summarize(with_group),
        without_factor=summarize(without_group),
    )


def factor_splits(
    records: Iterable[NightRecord],
    date_range: DateRange,
    factors: Iterable[FactorDefinition],
) -> dict[str, FactorSplit]:
    """Splits for every factor that has nights on both sides"""
    records = list(records)
    splits = {}
    for factor in factors:
        split = factor_split(records, date_range, factor.id)
        if split is not None:
            splits[factor.id] = split
    return splits
