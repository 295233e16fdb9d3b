from __future__ import annotations

from flask import Flask, request

from ..common.responses import failure, json_body, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _records_response(result):
        if not result.ok:
            return failure(result.error)
        records = result.value
        return success([r.to_dict() for r in records], count=len(records))

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return _records_response(service.list_records())

    @app.route("/api/attendance/date-range", methods=["GET"], endpoint="attendance_date_range")
    def attendance_date_range():
        return _records_response(
            service.list_for_date_range(request.args.get("startDate"), request.args.get("endDate"))
        )

    @app.route("/api/attendance/employee/<path:employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: str):
        result = service.list_for_employee(employee_id)
        if not result.ok:
            return failure(result.error)

        view = result.value
        return success(
            [r.to_dict() for r in view.records],
            count=len(view.records),
            employee=view.employee.identity(),
            statistics=view.statistics.to_dict(),
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        body = json_body()
        result = service.mark(
            employee_id=body.get("employeeId"),
            date=body.get("date"),
            status=body.get("status"),
        )
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict(), status=201, message="Attendance marked successfully")

    @app.route("/api/attendance/<int:record_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(record_id: int):
        result = service.update_status(record_id, json_body().get("status"))
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict(), message="Attendance updated successfully")

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: int):
        result = service.delete_record(record_id)
        if not result.ok:
            return failure(result.error)
        return success(result.value, message="Attendance record deleted successfully")
