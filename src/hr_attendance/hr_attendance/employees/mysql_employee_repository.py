from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, employee_id, name, email, department, created_at, updated_at"


def _to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        id=int(row["id"]),
        employee_id=row["employee_id"],
        name=row["name"],
        email=row["email"],
        department=row["department"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, id DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, email, department)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, name, email, department),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: str, *, name: str, email: str, department: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, department=%s
                WHERE employee_id=%s
                """,
                (name, email, department, employee_id),
            )
            return cur.rowcount > 0

    def delete_by_employee_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
