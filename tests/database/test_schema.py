from __future__ import annotations

import re
from pathlib import Path

import pytest

from src.hr_attendance.hr_attendance.core.constants import EMPLOYEE_ID_MAX_LENGTH, TEXT_MAX_LENGTH
from src.hr_attendance.hr_attendance.database.bootstrap import _iter_sql_statements

SCHEMA = (Path(__file__).resolve().parents[2] / "database" / "schema.sql").read_text(encoding="utf-8")


def _column(name: str, table: str = "employees") -> str:
    create = next(s for s in _iter_sql_statements(SCHEMA) if f"TABLE IF NOT EXISTS {table}" in s)
    return next(ln.strip() for ln in create.splitlines() if ln.strip().startswith(f"{name} "))


@pytest.mark.parametrize("name", ["employee_id", "email"])
def test_unique_text_columns_compare_exactly(name):
    assert "COLLATE utf8mb4_bin" in _column(name)


@pytest.mark.parametrize(
    "name, width",
    [
        ("employee_id", EMPLOYEE_ID_MAX_LENGTH),
        ("name", TEXT_MAX_LENGTH),
        ("email", TEXT_MAX_LENGTH),
        ("department", TEXT_MAX_LENGTH),
    ],
)
def test_column_widths_match_validation_limits(name, width):
    assert re.search(rf"VARCHAR\({width}\)", _column(name))


def test_attendance_employee_id_matches_directory_width():
    assert f"VARCHAR({EMPLOYEE_ID_MAX_LENGTH})" in _column("employee_id", "attendance_records")
