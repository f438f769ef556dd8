"""
Service Layer Package

Pure computations over night records:
- night_metrics: per-night derived metrics
- quality: Good/Ok/Poor classification
- aggregation: series, averages, trend and factor splits over date ranges
- ingestion: raw stored entries -> validated NightRecord values
- dashboard: week/month summary built from the above
"""

from nightlog.services.night_metrics import calculate_metrics
from nightlog.services.quality import classify, classify_record, quality_by_date, quality_score
from nightlog.services.aggregation import (
    daily_series,
    factor_split,
    factor_splits,
    filter_records,
    period_averages,
    trend,
    trend_direction,
)
from nightlog.services.ingestion import load_records_json, parse_record, parse_records
from nightlog.services.dashboard import build_dashboard

__all__ = [
    "calculate_metrics",
    "classify",
    "classify_record",
    "quality_by_date",
    "quality_score",
    "daily_series",
    "factor_split",
    "factor_splits",
    "filter_records",
    "period_averages",
    "trend",
    "trend_direction",
    "load_records_json",
    "parse_record",
    "parse_records",
    "build_dashboard",
]
