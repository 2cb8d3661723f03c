"""Display formatting for the date columns of the published sheet."""

from __future__ import annotations

from datetime import date, datetime

from .errors import DateParseError
from .model import MISSING_DATE, DateDisplay

DISPLAY_FORMAT = "%d/%m/%Y"


def parse_timestamp(value: object) -> date:
    """Read an ISO-8601 string or date-like object as a calendar date.

    The calendar date is taken as written; offsets are not applied, so
    ``2024-03-05T00:00:00Z`` is the 5th of March regardless of local timezone.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(f"Unsupported timestamp type: {type(value).__name__}")

    normalized = value.strip()
    if not normalized:
        raise DateParseError("Empty timestamp")
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(normalized).date()
    except ValueError as exc:
        raise DateParseError(f"Invalid timestamp: {value!r}") from exc


def format_display_date(value: object | None) -> DateDisplay:
    """Return ``dd/mm/yyyy`` for a usable timestamp, else the sentinel ``0``."""

    if value is None:
        return MISSING_DATE
    try:
        parsed = parse_timestamp(value)
    except DateParseError:
        return MISSING_DATE
    return parsed.strftime(DISPLAY_FORMAT)


__all__ = ["DISPLAY_FORMAT", "format_display_date", "parse_timestamp"]
