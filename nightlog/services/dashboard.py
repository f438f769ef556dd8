"""Week/month stats summary assembled from the aggregation services"""
import logging
from datetime import date
from typing import Iterable, Optional

from nightlog.exceptions import ValidationError
from nightlog.models.aggregate import Dashboard
from nightlog.models.calendar import DateRange
from nightlog.models.night import (
    DEFAULT_FACTORS,
    LEGACY_FACTORS,
    FactorDefinition,
    NightRecord,
)
from nightlog.services.aggregation import (
    daily_series,
    factor_splits,
    period_averages,
    trend,
)
from nightlog.services.quality import quality_by_date
from nightlog.utils.calendar_utils import month_range, week_range

logger = logging.getLogger(__name__)

PERIODS = {
    "week": week_range,
    "month": month_range,
}


def period_range(period: str, today: date) -> DateRange:
    try:
        return PERIODS[period](today)
    except KeyError:
        raise ValidationError(
            message=f"Unknown period '{period}'. Expected one of: {', '.join(PERIODS)}",
            field="period",
            value=period,
            operation="period_range",
        ) from None


def build_dashboard(
    records: Iterable[NightRecord],
    today: date,
    period: str = "week",
    factors: Optional[Iterable[FactorDefinition]] = None,
) -> Dashboard:
    """
    Build the stats view for the last week or month ending on today

    Args:
        records: All night records, any order
        today: Reference date (the last day of the period)
        period: 'week' (7 days) or 'month' (30 days)
        factors: Factor definitions to split on (defaults to DEFAULT_FACTORS
            plus LEGACY_FACTORS, so older entries still get their splits)

    Returns:
        Dashboard with chart series, averages, trend, factor splits and the
        quality tier of every record
    """
    records = list(records)
    date_range = period_range(period, today)
    factors = list(factors) if factors is not None else DEFAULT_FACTORS + LEGACY_FACTORS

    dashboard = Dashboard(
        range=date_range,
        series=daily_series(records, date_range),
        averages=period_averages(records, date_range),
        trend=trend(records, date_range),
        factor_splits=factor_splits(records, date_range, factors),
        quality=quality_by_date(records),
    )
    logger.info(
        f"Built {period} dashboard {date_range.start}..{date_range.end}: "
        f"{dashboard.averages.night_count if dashboard.averages else 0} nights, "
        f"trend {dashboard.trend.direction.value}"
    )
    return dashboard
