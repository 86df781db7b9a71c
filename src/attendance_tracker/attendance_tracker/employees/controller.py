from __future__ import annotations

from flask import Flask, session

from ..common.http import admin_required, json_body, json_endpoint, success
from ..common.validators import require_fields
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @json_endpoint("Login failed. Please try again.")
    def login():
        data = json_body()
        require_fields(data, ("username", "password"))

        employee = container.auth_service.authenticate(str(data["username"]), str(data["password"]))

        session.clear()
        session["employee_id"] = employee.employee_id
        session["role"] = employee.role.value
        return success(user=employee.to_public_dict(), message="Login successful")

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return success(message="Logged out")

    @app.route("/api/register", methods=["POST"], endpoint="register")
    @json_endpoint("Registration failed. Please try again.")
    def register_employee():
        employee_id = container.employee_service.register(json_body())
        return success(201, message="Account created successfully", employee_id=employee_id)

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required
    @json_endpoint("Failed to fetch employees")
    def admin_users():
        employees = container.employee_service.list_employees()
        return success(users=[e.to_public_dict() for e in employees])

    @app.route("/api/admin/users/<int:employee_id>", methods=["GET"], endpoint="admin_user_get")
    @admin_required
    @json_endpoint("Failed to fetch employee")
    def admin_user_get(employee_id: int):
        employee = container.employee_service.get_employee(employee_id)
        return success(user=employee.to_public_dict())

    @app.route("/api/admin/users/<int:employee_id>", methods=["POST", "PUT"], endpoint="admin_user_update")
    @admin_required
    @json_endpoint("Failed to update employee")
    def admin_user_update(employee_id: int):
        container.employee_service.update_employee(employee_id, json_body())
        return success(message="Employee updated")

    @app.route("/api/admin/users/<int:employee_id>", methods=["DELETE"], endpoint="admin_user_deactivate")
    @admin_required
    @json_endpoint("Failed to deactivate employee")
    def admin_user_deactivate(employee_id: int):
        container.employee_service.deactivate_employee(employee_id)
        return success(message="Employee deactivated")
