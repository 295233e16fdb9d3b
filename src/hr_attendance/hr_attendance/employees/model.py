from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee in the directory.

    Plain data object, no DB access. ``employee_id`` is the business key used
    by attendance records; ``id`` is the generated row id.
    """

    id: int
    employee_id: str
    name: str
    email: str
    department: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def identity(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
        }

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            **self.identity(),
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
