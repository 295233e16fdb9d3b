from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT id, employee_id, attendance_date, status, created_at, updated_at
    FROM attendance_records
"""
_ORDER = "ORDER BY attendance_date DESC, id DESC"


def _to_record(row: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=int(row["id"]),
        employee_id=row["employee_id"],
        date=row["attendance_date"],
        status=AttendanceStatus(row["status"]),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {_ORDER}")
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s {_ORDER}", (employee_id,))
            return [_to_record(r) for r in fetchall(cur)]

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE attendance_date BETWEEN %s AND %s {_ORDER}",
                (start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (int(record_id),))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE employee_id=%s AND attendance_date=%s",
                (employee_id, work_date),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create(self, *, employee_id: str, work_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, attendance_date, status)
                VALUES(%s,%s,%s)
                """,
                (employee_id, work_date, status.value),
            )
            return int(cur.lastrowid)

    def update_status(self, record_id: int, *, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_records SET status=%s WHERE id=%s",
                (status.value, int(record_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0
