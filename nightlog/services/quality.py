"""
Night quality classification

Fixed additive rubric, each bucket scored independently:
- Efficiency: >= 85% -> 2, >= 75% -> 1
- Total sleep: >= 7h -> 2, >= 6h -> 1
- Feeling: >= 4 -> 2, >= 3 -> 1

Score >= 5 is Good, >= 3 is Ok, anything lower is Poor.
"""

import logging
from datetime import date
from typing import Iterable

from nightlog.models.night import NightMetrics, NightRecord, QualityTier
from nightlog.services.night_metrics import calculate_metrics

logger = logging.getLogger(__name__)

GOOD_THRESHOLD = 5
OK_THRESHOLD = 3


def _bucket(value: float, high: float, low: float) -> int:
    if value >= high:
        return 2
    if value >= low:
        return 1
    return 0


def quality_score(metrics: NightMetrics, feeling_rating: int) -> int:
    """Rubric score in [0, 6]"""
    return (
        _bucket(metrics.sleep_efficiency_percent, 85, 75)
        + _bucket(metrics.total_sleep_minutes / 60, 7, 6)
        + _bucket(feeling_rating, 4, 3)
    )


def classify(metrics: NightMetrics, feeling_rating: int) -> QualityTier:
    score = quality_score(metrics, feeling_rating)
    if score >= GOOD_THRESHOLD:
        return QualityTier.GOOD
    if score >= OK_THRESHOLD:
        return QualityTier.OK
    return QualityTier.POOR


def classify_record(record: NightRecord) -> QualityTier:
    return classify(calculate_metrics(record), record.feeling_rating)


def quality_by_date(records: Iterable[NightRecord]) -> dict[date, QualityTier]:
    """Quality tier per entry date, for the calendar view"""
    return {record.date: classify_record(record) for record in records}
