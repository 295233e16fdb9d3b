"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.hr_attendance.hr_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    result = container.attendance_service.list_for_employee("E1")
    if result.ok:
        print(result.value.statistics.to_dict())
    else:
        print(f"{result.kind.value}: {result.error.message}")


if __name__ == "__main__":
    main()
