from __future__ import annotations

from datetime import date, datetime

import pytest

from src.hr_attendance.hr_attendance.attendance.service import AttendanceService
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus, ErrorKind
from src.hr_attendance.hr_attendance.core.exceptions import ConflictError
from src.hr_attendance.hr_attendance.database.errors import DuplicateKeyError


def test_mark_truncates_to_calendar_day(attendance_service, ann):
    result = attendance_service.mark(employee_id="E1", date="2024-01-05T09:15:00", status="Present")

    assert result.ok
    rec = result.value
    assert rec.date == date(2024, 1, 5)
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.employee_id == "E1"


@pytest.mark.parametrize(
    "second",
    ["2024-01-05", "2024-01-05T23:00:00", "2024-01-05T00:00:00.000Z", datetime(2024, 1, 5, 12, 30)],
)
def test_second_mark_same_day_conflicts(attendance_service, attendance_repo, ann, second):
    attendance_service.mark(employee_id="E1", date="2024-01-05", status="Present").unwrap()

    result = attendance_service.mark(employee_id="E1", date=second, status="Absent")

    assert isinstance(result.error, ConflictError)
    assert "Please update instead" in result.error.message
    assert [r.status for r in attendance_repo.list_all()] == [AttendanceStatus.PRESENT]


def test_next_day_is_allowed(attendance_service, ann):
    attendance_service.mark(employee_id="E1", date="2024-01-05T23:59:59", status="Present").unwrap()

    result = attendance_service.mark(employee_id="E1", date="2024-01-06T00:00:01", status="Absent")

    assert result.ok
    assert result.value.date == date(2024, 1, 6)


def test_mark_unknown_employee_is_not_found(attendance_service, attendance_repo):
    result = attendance_service.mark(employee_id="E2", date="2024-01-05", status="Present")

    assert result.kind == ErrorKind.NOT_FOUND
    assert attendance_repo.list_all() == []


def test_mark_unknown_employee_wins_over_unparseable_date(attendance_service):
    result = attendance_service.mark(employee_id="E2", date="someday", status="Present")

    assert result.kind == ErrorKind.NOT_FOUND


@pytest.mark.parametrize(
    "payload, fields",
    [
        ({"employee_id": None, "date": "2024-01-05", "status": "Present"}, ["employeeId"]),
        ({"employee_id": "E1", "date": "", "status": "Present"}, ["date"]),
        ({"employee_id": "E1", "date": "2024-01-05", "status": None}, ["status"]),
        ({"employee_id": "E1", "date": "2024-01-05", "status": "Late"}, ["status"]),
        ({"employee_id": "E1", "date": "2024-01-05", "status": "present"}, ["status"]),
        ({"employee_id": "", "date": None, "status": "Maybe"}, ["employeeId", "date", "status"]),
    ],
)
def test_mark_validation(attendance_service, ann, payload, fields):
    result = attendance_service.mark(**payload)

    assert result.kind == ErrorKind.VALIDATION
    assert [e.field for e in result.error.errors] == fields


def test_mark_unparseable_date_for_known_employee(attendance_service, ann):
    result = attendance_service.mark(employee_id="E1", date="2024-13-45", status="Present")

    assert result.kind == ErrorKind.VALIDATION
    assert result.error.errors[0].message == "Date is not a valid date"


def test_storage_duplicate_on_race_becomes_conflict(employees_repo, attendance_repo, ann):
    class StaleReads(type(attendance_repo)):
        def get_for_employee_and_date(self, employee_id, work_date):
            return None

    repo = StaleReads()
    repo.create(employee_id="E1", work_date=date(2024, 1, 5), status=AttendanceStatus.ABSENT)
    svc = AttendanceService(repo, employees_repo)

    result = svc.mark(employee_id="E1", date="2024-01-05T10:00:00", status="Present")

    assert result.kind == ErrorKind.CONFLICT
    assert isinstance(result.error.__cause__, DuplicateKeyError)
    assert len(repo.list_all()) == 1


def test_list_is_date_descending_and_repeatable(attendance_service, employee_service, ann):
    employee_service.create_employee(employee_id="E2", name="Bo", email="b@x.com", department="Ops").unwrap()
    for emp, day in [("E1", "2024-01-03"), ("E2", "2024-01-05"), ("E1", "2024-01-04")]:
        attendance_service.mark(employee_id=emp, date=day, status="Present").unwrap()

    first = attendance_service.list_records().value
    second = attendance_service.list_records().value

    assert [r.date.isoformat() for r in first] == ["2024-01-05", "2024-01-04", "2024-01-03"]
    assert first == second


def test_list_for_employee_includes_statistics(attendance_service, ann):
    attendance_service.mark(employee_id="E1", date="2024-01-01", status="Present").unwrap()
    attendance_service.mark(employee_id="E1", date="2024-01-02", status="Absent").unwrap()
    attendance_service.mark(employee_id="E1", date="2024-01-03", status="Present").unwrap()

    view = attendance_service.list_for_employee("E1").value

    assert view.employee == ann
    assert [r.date.day for r in view.records] == [3, 2, 1]
    assert view.statistics.total_days == 3
    assert view.statistics.present_days == 2
    assert view.statistics.absent_days == 1
    assert str(view.statistics.attendance_percentage) == "66.67"


def test_statistics_follow_status_updates(attendance_service, ann):
    rec = attendance_service.mark(employee_id="E1", date="2024-01-01", status="Absent").unwrap()
    assert attendance_service.list_for_employee("E1").value.statistics.present_days == 0

    attendance_service.update_status(rec.id, "Present").unwrap()

    stats = attendance_service.list_for_employee("E1").value.statistics
    assert stats.present_days == 1
    assert str(stats.attendance_percentage) == "100.00"


def test_list_for_unknown_employee(attendance_service):
    assert attendance_service.list_for_employee("ghost").kind == ErrorKind.NOT_FOUND


def test_deleting_employee_keeps_attendance(attendance_service, employee_service, attendance_repo, ann):
    rec = attendance_service.mark(employee_id="E1", date="2024-01-05", status="Present").unwrap()

    employee_service.delete_employee("E1").unwrap()

    assert attendance_repo.get_by_id(rec.id) == rec
    assert attendance_service.list_records().value == [rec]
    assert attendance_service.list_for_employee("E1").kind == ErrorKind.NOT_FOUND


def test_date_range_is_inclusive(attendance_service, ann):
    for day in ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04"]:
        attendance_service.mark(employee_id="E1", date=day, status="Present").unwrap()

    result = attendance_service.list_for_date_range("2024-01-02", "2024-01-03T08:00:00")

    assert [r.date.isoformat() for r in result.value] == ["2024-01-03", "2024-01-02"]


def test_date_range_start_after_end_is_empty(attendance_service, ann):
    attendance_service.mark(employee_id="E1", date="2024-01-02", status="Present").unwrap()

    assert attendance_service.list_for_date_range("2024-01-05", "2024-01-01").value == []


@pytest.mark.parametrize(
    "start, end, fields",
    [
        (None, "2024-01-01", ["startDate"]),
        ("2024-01-01", "", ["endDate"]),
        ("yesterday", "2024-01-01", ["startDate"]),
        (None, None, ["startDate", "endDate"]),
    ],
)
def test_date_range_validation(attendance_service, start, end, fields):
    result = attendance_service.list_for_date_range(start, end)

    assert result.kind == ErrorKind.VALIDATION
    assert [e.field for e in result.error.errors] == fields


def test_update_status_keeps_date_and_employee(attendance_service, ann):
    rec = attendance_service.mark(employee_id="E1", date="2024-01-05", status="Present").unwrap()

    updated = attendance_service.update_status(rec.id, "Absent").unwrap()

    assert updated.id == rec.id
    assert updated.status == AttendanceStatus.ABSENT
    assert updated.date == rec.date
    assert updated.employee_id == rec.employee_id


@pytest.mark.parametrize("status", [None, "", "Late"])
def test_update_status_validation(attendance_service, ann, status):
    rec = attendance_service.mark(employee_id="E1", date="2024-01-05", status="Present").unwrap()

    result = attendance_service.update_status(rec.id, status)

    assert result.kind == ErrorKind.VALIDATION


def test_update_validation_precedes_lookup(attendance_service):
    assert attendance_service.update_status(999, "Late").kind == ErrorKind.VALIDATION
    assert attendance_service.update_status(999, "Present").kind == ErrorKind.NOT_FOUND
    assert attendance_service.update_status("abc", "Present").kind == ErrorKind.NOT_FOUND


def test_delete_record(attendance_service, attendance_repo, ann):
    rec = attendance_service.mark(employee_id="E1", date="2024-01-05", status="Present").unwrap()

    assert attendance_service.delete_record(rec.id).value == {}
    assert attendance_repo.list_all() == []
    assert attendance_service.delete_record(rec.id).kind == ErrorKind.NOT_FOUND
