"""Per-night sleep metrics derived from a NightRecord"""
import logging

from nightlog.models.night import NightMetrics, NightRecord
from nightlog.utils.time_arithmetic import elapsed_minutes, interval_minutes

logger = logging.getLogger(__name__)


def calculate_metrics(record: NightRecord) -> NightMetrics:
    """
    Derive time in bed, latency, interruptions, total sleep and efficiency

    Total sleep is floored at zero when latency plus interruptions exceed
    time in bed; efficiency is 0 when time in bed is 0.

    Args:
        record: Validated night entry

    Returns:
        NightMetrics for the night

    Example:
        >>> # 22:30 in bed, asleep 23:00, up 07:00
        >>> m = calculate_metrics(record)
        >>> m.time_in_bed_minutes, m.total_sleep_minutes
        (510, 480)
    """
    time_in_bed = elapsed_minutes(record.bedtime, record.wake_time)
    sleep_latency = elapsed_minutes(record.bedtime, record.sleep_onset)
    interruption_total = sum(interval_minutes(i) for i in record.interruptions)

    raw_sleep = time_in_bed - sleep_latency - interruption_total
    total_sleep = max(0, raw_sleep)
    if raw_sleep < 0:
        logger.debug(
            f"Night {record.date}: latency + interruptions exceed time in bed "
            f"by {-raw_sleep} min, clamping total sleep to 0"
        )

    efficiency = (total_sleep / time_in_bed) * 100 if time_in_bed > 0 else 0.0
    nap_total = record.total_nap_minutes

    return NightMetrics(
        time_in_bed_minutes=time_in_bed,
        sleep_latency_minutes=sleep_latency,
        interruption_minutes=interruption_total,
        total_sleep_minutes=total_sleep,
        sleep_efficiency_percent=efficiency,
        nap_minutes=nap_total,
        adjusted_total_minutes=total_sleep + nap_total,
    )
