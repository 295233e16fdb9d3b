from __future__ import annotations

from typing import Any, Sequence

from ..common.datetime_utils import normalize_calendar_day
from ..common.validators import (
    check_calendar_day,
    check_present,
    check_required_text,
    check_status,
    raise_for_errors,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, NotFoundError
from ..core.logging import get_logger
from ..core.result import returns_result
from ..database.errors import DuplicateKeyError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, EmployeeAttendance
from .repository import AttendanceRepository
from .statistics import compute_statistics

logger = get_logger(__name__)


def _already_marked() -> ConflictError:
    return ConflictError("Attendance already marked for this date. Please update instead.")


class AttendanceService:
    """Use case: keep one attendance status per employee per calendar day.

    Writes check the directory for the employee, truncate the submitted date
    to its calendar day and refuse a second mark for the same day. The
    (employee, day) UNIQUE key in storage backs up the read-then-insert check
    when two marks race.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def _require_employee(self, employee_id: Any) -> Employee:
        employee = None
        if isinstance(employee_id, str) and employee_id.strip():
            employee = self._employees.get_by_employee_id(employee_id.strip())
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _require_record(self, record_id: Any) -> AttendanceRecord:
        try:
            record_id = int(record_id)
        except (TypeError, ValueError):
            raise NotFoundError("Attendance record not found") from None

        record = self._attendance.get_by_id(record_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    @returns_result("fetching attendance records")
    def list_records(self) -> Sequence[AttendanceRecord]:
        return list(self._attendance.list_all())

    @returns_result("fetching employee attendance")
    def list_for_employee(self, employee_id: str) -> EmployeeAttendance:
        employee = self._require_employee(employee_id)
        records = list(self._attendance.list_for_employee(employee.employee_id))
        return EmployeeAttendance(
            employee=employee,
            records=records,
            statistics=compute_statistics(records),
        )

    @returns_result("fetching attendance by date range")
    def list_for_date_range(self, start_date: Any, end_date: Any) -> Sequence[AttendanceRecord]:
        """Records whose day lies in [start_date, end_date], both ends inclusive."""

        raise_for_errors(
            [
                *check_calendar_day(start_date, "startDate", "Start date"),
                *check_calendar_day(end_date, "endDate", "End date"),
            ]
        )
        start = normalize_calendar_day(start_date)
        end = normalize_calendar_day(end_date)
        if start > end:
            return []
        return list(self._attendance.list_between(start_date=start, end_date=end))

    @returns_result("marking attendance")
    def mark(self, *, employee_id: Any, date: Any, status: Any) -> AttendanceRecord:
        raise_for_errors(
            [
                *check_required_text(employee_id, "employeeId", "Employee ID"),
                *check_present(date, "date", "Date"),
                *check_status(status),
            ]
        )
        employee = self._require_employee(employee_id)
        raise_for_errors(check_calendar_day(date, "date", "Date"))
        work_date = normalize_calendar_day(date)
        status = AttendanceStatus(status)

        if self._attendance.get_for_employee_and_date(employee.employee_id, work_date):
            raise _already_marked()

        try:
            record_id = self._attendance.create(
                employee_id=employee.employee_id,
                work_date=work_date,
                status=status,
            )
        except DuplicateKeyError as e:
            raise _already_marked() from e

        logger.info("Marked %s %s on %s", employee.employee_id, status.value, work_date.isoformat())
        return self._require_record(record_id)

    @returns_result("updating attendance")
    def update_status(self, record_id: Any, status: Any) -> AttendanceRecord:
        """Change the status of an existing record; its employee and date never change."""

        raise_for_errors(check_status(status))
        record = self._require_record(record_id)
        if not self._attendance.update_status(record.id, status=AttendanceStatus(status)):
            raise NotFoundError("Attendance record not found")
        return self._require_record(record.id)

    @returns_result("deleting attendance")
    def delete_record(self, record_id: Any) -> dict:
        record = self._require_record(record_id)
        if not self._attendance.delete_by_id(record.id):
            raise NotFoundError("Attendance record not found")
        logger.info("Deleted attendance record %s", record.id)
        return {}
