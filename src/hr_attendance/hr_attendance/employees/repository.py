from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee

# UNIQUE constraint names from database/schema.sql
EMPLOYEE_ID_KEY = "uq_employees_employee_id"
EMAIL_KEY = "uq_employees_email"


class EmployeeRepository(Protocol):
    """Repository interface for the employee directory.

    Note (DIP): services depend on this interface, not on a concrete DB.
    ``create`` and ``update`` raise ``DuplicateKeyError`` when a UNIQUE key
    collides.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, employee_id: str, name: str, email: str, department: str) -> int:
        raise NotImplementedError

    def update(self, employee_id: str, *, name: str, email: str, department: str) -> bool:
        raise NotImplementedError

    def delete_by_employee_id(self, employee_id: str) -> bool:
        raise NotImplementedError
