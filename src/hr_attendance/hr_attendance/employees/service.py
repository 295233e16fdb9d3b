from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import (
    check_email,
    check_required_text,
    clean_email,
    clean_text,
    raise_for_errors,
)
from ..core.constants import EMPLOYEE_ID_MAX_LENGTH, TEXT_MAX_LENGTH
from ..core.exceptions import DuplicateError, NotFoundError
from ..core.logging import get_logger
from ..core.result import returns_result
from ..database.errors import DuplicateKeyError
from .model import Employee
from .repository import EMAIL_KEY, EmployeeRepository

logger = get_logger(__name__)


def _employee_id_taken() -> DuplicateError:
    return DuplicateError("Employee ID already exists", field="employeeId")


def _email_taken() -> DuplicateError:
    return DuplicateError("Email address already exists", field="email")


def _duplicate_for_key(key: str) -> DuplicateError:
    return _email_taken() if key == EMAIL_KEY else _employee_id_taken()


class EmployeeService:
    """Use case: maintain the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _require(self, employee_id: Any) -> Employee:
        employee = None
        if isinstance(employee_id, str) and employee_id.strip():
            employee = self._employees.get_by_employee_id(employee_id.strip())
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    @returns_result("fetching employees")
    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_all())

    @returns_result("fetching employee")
    def get_employee(self, employee_id: str) -> Employee:
        return self._require(employee_id)

    @returns_result("creating employee")
    def create_employee(self, *, employee_id: Any, name: Any, email: Any, department: Any) -> Employee:
        raise_for_errors(
            [
                *check_required_text(employee_id, "employeeId", "Employee ID", EMPLOYEE_ID_MAX_LENGTH),
                *check_required_text(name, "name", "Name", TEXT_MAX_LENGTH),
                *check_email(email),
                *check_required_text(department, "department", "Department", TEXT_MAX_LENGTH),
            ]
        )
        employee_id = clean_text(employee_id)
        email = clean_email(email)

        if self._employees.get_by_employee_id(employee_id):
            raise _employee_id_taken()
        if self._employees.get_by_email(email):
            raise _email_taken()

        try:
            self._employees.create(
                employee_id=employee_id,
                name=clean_text(name),
                email=email,
                department=clean_text(department),
            )
        except DuplicateKeyError as e:
            # Lost a race with a concurrent insert; the UNIQUE key decides.
            raise _duplicate_for_key(e.key) from e

        logger.info("Created employee %s", employee_id)
        return self._require(employee_id)

    @returns_result("updating employee")
    def update_employee(
        self,
        employee_id: str,
        *,
        name: Optional[Any] = None,
        email: Optional[Any] = None,
        department: Optional[Any] = None,
    ) -> Employee:
        """Apply a partial update; ``None`` means "leave unchanged"."""

        current = self._require(employee_id)

        errors = []
        if name is not None:
            errors += check_required_text(name, "name", "Name", TEXT_MAX_LENGTH)
        if email is not None:
            errors += check_email(email)
        if department is not None:
            errors += check_required_text(department, "department", "Department", TEXT_MAX_LENGTH)
        raise_for_errors(errors)

        new_email = clean_email(email) if email is not None else current.email
        if new_email != current.email:
            other = self._employees.get_by_email(new_email)
            if other and other.employee_id != current.employee_id:
                raise _email_taken()

        try:
            updated = self._employees.update(
                current.employee_id,
                name=clean_text(name) if name is not None else current.name,
                email=new_email,
                department=clean_text(department) if department is not None else current.department,
            )
        except DuplicateKeyError as e:
            raise _duplicate_for_key(e.key) from e
        if not updated:
            raise NotFoundError("Employee not found")

        return self._require(current.employee_id)

    @returns_result("deleting employee")
    def delete_employee(self, employee_id: str) -> Employee:
        """Remove an employee; their attendance records are left as they are."""

        current = self._require(employee_id)
        if not self._employees.delete_by_employee_id(current.employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", current.employee_id)
        return current
