"""Field validators.

Each check is a pure function returning a list of ``FieldError`` (empty when
the value is fine) so callers can collect every problem before writing.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional

from ..core.constants import EMAIL_PATTERN, TEXT_MAX_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import FieldError, ValidationError
from .datetime_utils import normalize_calendar_day

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_present(value: Any, field: str, label: str) -> List[FieldError]:
    if is_blank(value):
        return [FieldError(field, f"{label} is required")]
    return []


def check_required_text(
    value: Any, field: str, label: str, max_length: Optional[int] = None
) -> List[FieldError]:
    errors = check_present(value, field, label)
    if errors:
        return errors
    if not isinstance(value, str):
        return [FieldError(field, f"{label} must be a string")]
    if max_length is not None and len(value.strip()) > max_length:
        return [FieldError(field, f"{label} must be at most {max_length} characters")]
    return []


def check_email(value: Any, field: str = "email") -> List[FieldError]:
    errors = check_required_text(value, field, "Email", TEXT_MAX_LENGTH)
    if errors:
        return errors
    if not _EMAIL_RE.match(value.strip()):
        return [FieldError(field, "Please provide a valid email address")]
    return []


def check_status(value: Any, field: str = "status") -> List[FieldError]:
    if is_blank(value):
        return [FieldError(field, "Status is required")]
    try:
        AttendanceStatus(value)
    except (TypeError, ValueError):
        return [FieldError(field, "Status must be either Present or Absent")]
    return []


def check_calendar_day(value: Any, field: str, label: str) -> List[FieldError]:
    if is_blank(value):
        return [FieldError(field, f"{label} is required")]
    try:
        normalize_calendar_day(value)
    except (TypeError, ValueError, OverflowError, OSError):
        return [FieldError(field, f"{label} is not a valid date")]
    return []


def raise_for_errors(errors: Iterable[FieldError]) -> None:
    errors = list(errors)
    if errors:
        raise ValidationError(errors)


def clean_text(value: str) -> str:
    return value.strip()


def clean_email(value: str) -> str:
    return value.strip().lower()
