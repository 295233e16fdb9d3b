from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..core.constants import PERCENTAGE_PLACES
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceStatistics

_QUANTUM = Decimal(1).scaleb(-PERCENTAGE_PLACES)


def attendance_percentage(present_days: int, total_days: int) -> Decimal:
    """Share of present days in percent, rounded half-up to two places (0 when no days)."""
    if total_days <= 0:
        return Decimal(0).quantize(_QUANTUM)
    return (Decimal(present_days) * 100 / Decimal(total_days)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def compute_statistics(records: Iterable[AttendanceRecord]) -> AttendanceStatistics:
    total = present = absent = 0
    for r in records:
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1

    return AttendanceStatistics(
        total_days=total,
        present_days=present,
        absent_days=absent,
        attendance_percentage=attendance_percentage(present, total),
    )
