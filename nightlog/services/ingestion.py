"""
Record ingestion

Turns raw stored entries (dicts as persisted by the entry form, or a JSON
array of them) into validated NightRecord values. Both nap input modes and
the legacy lifestyle fields are resolved here, once, so nothing downstream
has to care how an entry was originally recorded.
"""

import json
import logging
from typing import Any, Iterable

from pydantic import ValidationError as PydanticValidationError

from nightlog.exceptions import ValidationError
from nightlog.models.night import NightRecord

logger = logging.getLogger(__name__)


def _first_error_field(error: PydanticValidationError) -> str:
    errors = error.errors()
    if not errors:
        return "entry"
    return ".".join(str(part) for part in errors[0]["loc"]) or "entry"


def parse_record(raw: dict[str, Any]) -> NightRecord:
    """
    Validate one raw entry

    Raises:
        ValidationError: If any field is missing or malformed
    """
    try:
        return NightRecord.model_validate(raw)
    except PydanticValidationError as e:
        field = _first_error_field(e)
        raise ValidationError(
            message=e.errors()[0]["msg"] if e.errors() else str(e),
            field=field,
            value=raw.get(field) if isinstance(raw, dict) else raw,
            operation="parse_record",
            cause=e,
        ) from e


def parse_records(raw_entries: Iterable[dict[str, Any]]) -> list[NightRecord]:
    """
    Validate a collection of raw entries

    At most one record is kept per date; when a date appears more than once
    the later entry wins. The result is sorted by date.
    """
    by_date: dict = {}
    for raw in raw_entries:
        record = parse_record(raw)
        if record.date in by_date:
            logger.warning(f"Duplicate entry for {record.date}, keeping the later one")
        by_date[record.date] = record

    logger.debug(f"Parsed {len(by_date)} night records")
    return [by_date[day] for day in sorted(by_date)]


def load_records_json(text: str) -> list[NightRecord]:
    """
    Parse a JSON array of stored entries

    Raises:
        ValidationError: If the JSON is malformed, not an array, or an entry is invalid
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            message=f"Invalid JSON: {e.msg}",
            field="entries",
            operation="load_records_json",
            cause=e,
        ) from e

    if not isinstance(data, list):
        raise ValidationError(
            message=f"Expected a JSON array of entries, got {type(data).__name__}",
            field="entries",
            operation="load_records_json",
        )
    return parse_records(data)
