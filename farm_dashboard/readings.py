import logging
import math
import re
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, Final

from .models import Reading

logger = logging.getLogger(__name__)

FIELD_SOIL_MOISTURE: Final[str] = "field1"
FIELD_TEMPERATURE: Final[str] = "field2"
FIELD_HUMIDITY: Final[str] = "field3"
FIELD_PUMP_STATE: Final[str] = "field4"
FIELD_CREATED_AT: Final[str] = "created_at"

_FLOAT_PREFIX: Final = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX: Final = re.compile(r"\s*[+-]?\d+")


def _to_float(value: Any) -> float | None:
    """Leading-number parse: ``"25.4 %"`` reads as 25.4, ``"1_0"`` as 1."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            return None
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if match is None:
            return None
        result = float(match.group())
    return result if math.isfinite(result) else None


def _to_int(value: Any) -> int | None:
    """Leading-integer parse: ``"1.0"`` reads as 1."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value))
    return int(match.group()) if match else None


def _to_datetime(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def latest_entry(payload: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Return the first (most recent) feed entry, or None when there is none."""
    feeds = payload.get("feeds")
    if not isinstance(feeds, list) or not feeds:
        logger.warning("ThingSpeak API returned no data")
        return None
    entry = feeds[0]
    if not isinstance(entry, Mapping):
        logger.warning("ThingSpeak feed entry has unexpected type: %s", type(entry).__name__)
        return None
    return entry


def reading_from_entry(entry: Mapping[str, Any]) -> Reading:
    """Build a Reading from a feed entry.

    Fields that are missing or not numeric become 0 and are listed in
    ``Reading.invalid_fields``.
    """
    invalid: list[str] = []

    def _number(field: str) -> float:
        parsed = _to_float(entry.get(field))
        if parsed is None:
            invalid.append(field)
            return 0.0
        return parsed

    soil = _number(FIELD_SOIL_MOISTURE)
    temperature = _number(FIELD_TEMPERATURE)
    humidity = _number(FIELD_HUMIDITY)

    pump = _to_int(entry.get(FIELD_PUMP_STATE))
    if pump is None:
        invalid.append(FIELD_PUMP_STATE)
        pump = 0

    created_at = _to_datetime(entry.get(FIELD_CREATED_AT))
    if created_at is None:
        invalid.append(FIELD_CREATED_AT)

    if invalid:
        logger.debug("Coerced unparsable feed fields to zero: %s", invalid)

    return Reading(
        soil_moisture=soil,
        temperature=temperature,
        humidity=humidity,
        pump_state=pump,
        last_updated=created_at,
        invalid_fields=tuple(invalid),
    )
