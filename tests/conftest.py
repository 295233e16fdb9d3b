from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord
from src.hr_attendance.hr_attendance.attendance.repository import EMPLOYEE_DATE_KEY
from src.hr_attendance.hr_attendance.container import build_services
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.database.errors import DuplicateKeyError
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.employees.repository import EMAIL_KEY, EMPLOYEE_ID_KEY
from src.hr_attendance.hr_attendance.main import create_app


class FakeClock:
    """Strictly increasing timestamps so "newest first" ordering is deterministic."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)):
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class InMemoryEmployees:
    """Employee repository enforcing the same UNIQUE keys as schema.sql."""

    def __init__(self, clock: Optional[FakeClock] = None):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1
        self._clock = clock or FakeClock()

    def list_all(self):
        return sorted(self._rows.values(), key=lambda e: (e.created_at, e.id), reverse=True)

    def _first(self, **match) -> Optional[Employee]:
        return next(
            (e for e in self._rows.values() if all(getattr(e, k) == v for k, v in match.items())),
            None,
        )

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        return self._first(employee_id=employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return self._first(email=email)

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        if self._first(employee_id=employee_id):
            raise DuplicateKeyError(EMPLOYEE_ID_KEY)
        if self._first(email=email):
            raise DuplicateKeyError(EMAIL_KEY)

        row_id = self._next_id
        self._next_id += 1
        now = self._clock()
        self._rows[row_id] = Employee(
            id=row_id,
            employee_id=employee_id,
            name=name,
            email=email,
            department=department,
            created_at=now,
            updated_at=now,
        )
        return row_id

    def update(self, employee_id: str, *, name: str, email: str, department: str) -> bool:
        current = self._first(employee_id=employee_id)
        if not current:
            return False
        other = self._first(email=email)
        if other and other.id != current.id:
            raise DuplicateKeyError(EMAIL_KEY)
        self._rows[current.id] = replace(
            current, name=name, email=email, department=department, updated_at=self._clock()
        )
        return True

    def delete_by_employee_id(self, employee_id: str) -> bool:
        current = self._first(employee_id=employee_id)
        if not current:
            return False
        del self._rows[current.id]
        return True


class InMemoryAttendance:
    """Attendance repository enforcing UNIQUE (employee_id, date)."""

    def __init__(self, clock: Optional[FakeClock] = None):
        self._rows: dict[int, AttendanceRecord] = {}
        self._next_id = 1
        self._clock = clock or FakeClock()

    def _sorted(self, rows):
        return sorted(rows, key=lambda r: (r.date, r.id), reverse=True)

    def list_all(self):
        return self._sorted(self._rows.values())

    def list_for_employee(self, employee_id: str):
        return self._sorted(r for r in self._rows.values() if r.employee_id == employee_id)

    def list_between(self, *, start_date: date, end_date: date):
        return self._sorted(r for r in self._rows.values() if start_date <= r.date <= end_date)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._rows.get(int(record_id))

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return next(
            (r for r in self._rows.values() if r.employee_id == employee_id and r.date == work_date),
            None,
        )

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> int:
        if any(r.employee_id == employee_id and r.date == work_date for r in self._rows.values()):
            raise DuplicateKeyError(EMPLOYEE_DATE_KEY)

        record_id = self._next_id
        self._next_id += 1
        now = self._clock()
        self._rows[record_id] = AttendanceRecord(
            id=record_id,
            employee_id=employee_id,
            date=work_date,
            status=status,
            created_at=now,
            updated_at=now,
        )
        return record_id

    def update_status(self, record_id: int, *, status: AttendanceStatus) -> bool:
        current = self._rows.get(int(record_id))
        if not current:
            return False
        self._rows[current.id] = replace(current, status=status, updated_at=self._clock())
        return True

    def delete_by_id(self, record_id: int) -> bool:
        return self._rows.pop(int(record_id), None) is not None


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def container(employees_repo, attendance_repo):
    return build_services(employees_repo=employees_repo, attendance_repo=attendance_repo)


@pytest.fixture
def employee_service(container):
    return container.employee_service


@pytest.fixture
def attendance_service(container):
    return container.attendance_service


@pytest.fixture
def ann(employee_service):
    return employee_service.create_employee(
        employee_id="E1", name="Ann", email="a@x.com", department="Eng"
    ).unwrap()


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
