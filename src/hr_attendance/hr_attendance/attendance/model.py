from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import format_date, format_timestamp
from ..core.enums import AttendanceStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance fact for an employee on a calendar day."""

    id: int
    employee_id: str
    date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": format_date(self.date),
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class AttendanceStatistics:
    total_days: int
    present_days: int
    absent_days: int
    attendance_percentage: Decimal

    def to_dict(self) -> dict:
        # An empty ledger reports the number 0, otherwise a two-decimal string.
        percentage = f"{self.attendance_percentage:.2f}" if self.total_days else 0
        return {
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "attendancePercentage": percentage,
        }


@dataclass(frozen=True)
class EmployeeAttendance:
    """Read-model: one employee's records with statistics computed at read time."""

    employee: Employee
    records: Sequence[AttendanceRecord]
    statistics: AttendanceStatistics
