from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

# UNIQUE constraint name from database/schema.sql
EMPLOYEE_DATE_KEY = "uq_attendance_employee_date"


class AttendanceRepository(Protocol):
    """Repository interface for the attendance ledger.

    All listings are ordered by date, most recent first. ``create`` raises
    ``DuplicateKeyError`` when the (employee, date) pair already exists.
    """

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def update_status(self, record_id: int, *, status: AttendanceStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        raise NotImplementedError
