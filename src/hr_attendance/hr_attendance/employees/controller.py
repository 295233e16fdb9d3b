from __future__ import annotations

from flask import Flask

from ..common.responses import failure, json_body, success
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        result = service.list_employees()
        if not result.ok:
            return failure(result.error)
        employees = result.value
        return success([e.to_dict() for e in employees], count=len(employees))

    @app.route("/api/employees/<path:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        result = service.get_employee(employee_id)
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        body = json_body()
        result = service.create_employee(
            employee_id=body.get("employeeId"),
            name=body.get("name"),
            email=body.get("email"),
            department=body.get("department"),
        )
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict(), status=201, message="Employee created successfully")

    @app.route("/api/employees/<path:employee_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(employee_id: str):
        body = json_body()
        result = service.update_employee(
            employee_id,
            name=body.get("name"),
            email=body.get("email"),
            department=body.get("department"),
        )
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict(), message="Employee updated successfully")

    @app.route("/api/employees/<path:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        result = service.delete_employee(employee_id)
        if not result.ok:
            return failure(result.error)
        return success(result.value.to_dict(), message="Employee deleted successfully")
