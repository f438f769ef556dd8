"""Configuration management"""
import os
from dotenv import load_dotenv

from nightlog.exceptions import ConfigurationError
from nightlog.models.clock import parse_hhmm

load_dotenv()

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Entry form defaults
DEFAULT_BEDTIME: str = os.getenv("NIGHTLOG_DEFAULT_BEDTIME", "22:30")
DEFAULT_SLEEP_TIME: str = os.getenv("NIGHTLOG_DEFAULT_SLEEP_TIME", "23:00")
DEFAULT_WAKE_TIME: str = os.getenv("NIGHTLOG_DEFAULT_WAKE_TIME", "07:00")

# Dashboard period: 'week' (last 7 days) or 'month' (last 30 days)
DEFAULT_PERIOD: str = os.getenv("NIGHTLOG_DEFAULT_PERIOD", "week")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_PERIODS = ("week", "month")


# Validation
def validate_config() -> None:
    """Validate configuration values"""
    if LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)} (got '{LOG_LEVEL}')",
            config_key="LOG_LEVEL",
        )
    for key, value in (
        ("NIGHTLOG_DEFAULT_BEDTIME", DEFAULT_BEDTIME),
        ("NIGHTLOG_DEFAULT_SLEEP_TIME", DEFAULT_SLEEP_TIME),
        ("NIGHTLOG_DEFAULT_WAKE_TIME", DEFAULT_WAKE_TIME),
    ):
        try:
            parse_hhmm(value)
        except ValueError as e:
            raise ConfigurationError(str(e), config_key=key, cause=e) from e
    if DEFAULT_PERIOD not in VALID_PERIODS:
        raise ConfigurationError(
            f"NIGHTLOG_DEFAULT_PERIOD must be 'week' or 'month' (got '{DEFAULT_PERIOD}')",
            config_key="NIGHTLOG_DEFAULT_PERIOD",
        )
