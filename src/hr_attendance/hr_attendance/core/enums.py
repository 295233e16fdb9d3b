from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status stored in the ledger."""

    PRESENT = "Present"
    ABSENT = "Absent"


class ErrorKind(str, Enum):
    """Closed set of failures a service operation can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    CONFLICT = "conflict"
    INTERNAL = "internal"
