from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

from ..core.constants import DATE_FORMAT

DateInput = Union[str, int, float, date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def normalize_calendar_day(value: DateInput) -> date:
    """Truncate a date, datetime, ISO-8601 string or epoch milliseconds to its calendar day.

    The day is taken as written: ``2024-01-05T23:00:00`` and
    ``2024-01-05T23:00:00+07:00`` both map to 2024-01-05 (no zone conversion).
    Epoch milliseconds have no written zone and are read as UTC.
    Raises ValueError/TypeError/OverflowError for anything unparseable.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).date()
    if not isinstance(value, str):
        raise TypeError(f"Unsupported date value type: {type(value)!r}")

    text = value.strip()
    if len(text) == 10:
        return parse_iso_date(text)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat(timespec="milliseconds") if value else None
