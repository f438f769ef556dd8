"""
Errors raised by the sleep diary engine

Every error carries the operation that failed (parse_record, build_dashboard,
validate_config, ...) and enough context to point at the offending entry or
setting. Errors are logged once, when they are raised.
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)

_JSON_SCALARS = (str, int, float, bool, type(None))


def _json_safe(value: Any) -> Any:
    """Raw entry values may be times, dates or arbitrary objects; show them as text"""
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    return str(value)


class NightlogError(Exception):
    """
    Base class for everything nightlog raises on purpose

    The request id ties the log line to the JSON printed by the CLI, so a
    rejected diary file can be traced back to the log.

    Example:
        raise NightlogError(
            message="Entry 3 has no wake time",
            operation="parse_records",
            context={"index": 3}
        )
    """

    def __init__(
        self,
        message: str,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or "An error occurred. Please try again."
        self.timestamp = datetime.now(timezone.utc)

        self._log_error()

    def _log_error(self) -> None:
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # 'message' is reserved by LogRecord
            "request_id": self.request_id,
            "operation": self.operation,
            "error_context": self.context,
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready summary, as printed by the CLI on failure

        Includes the failing operation and its context so a caller can show
        which entry or setting was rejected. Context values that JSON cannot
        carry are rendered as strings.
        """
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "operation": self.operation,
            "context": _json_safe(self.context),
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat()
        }
        if self.cause:
            data["cause"] = str(self.cause)
        return data


class ValidationError(NightlogError):
    """
    A diary entry or argument was rejected

    Raised for malformed "HH:MM" times, feeling ratings outside 1-5, nap or
    factor fields of the wrong shape, and unknown dashboard periods. `field`
    names the offending key as it appears in the stored entry.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=f"Invalid {field}: {message}" if field else message,
            context={"field": field, "value": value},
            **kwargs
        )


class ConfigurationError(NightlogError):
    """A NIGHTLOG_* or LOG_LEVEL setting is invalid"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message=f"nightlog is not properly configured. Check {config_key or 'your environment settings'}.",
            context={"config_key": config_key},
            **kwargs
        )
