from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import (
    require_email,
    require_fields,
    require_int,
    require_min_length,
    require_non_empty,
    require_phone,
)
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateRecordError,
    EmployeeNotFoundError,
    OfficeNotFoundError,
    ValidationError,
)
from ..offices.repository import OfficeRepository
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REGISTRATION_FIELDS = ("username", "password", "name", "email", "phone", "department", "primary_office")


class AuthService:
    """Use case: authenticate employee (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def authenticate(self, username: str, password: str) -> Employee:
        username = require_non_empty(username, "username")
        if not password:
            raise ValidationError("Field 'password' is required")

        employee = self._employees.get_by_username(username)
        if not employee or not employee.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(employee.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("Failed login for %s", username)
            raise AuthenticationError("Invalid username or password")

        return employee


class EmployeeService:
    """Use cases: self-registration and admin account management.

    Self-registered accounts are always employees; only update_employee grants admin.
    """

    def __init__(self, employees: EmployeeRepository, offices: OfficeRepository):
        self._employees = employees
        self._offices = offices

    def register(self, data: Mapping[str, Any]) -> int:
        for field in REGISTRATION_FIELDS:
            if not data.get(field):
                raise ValidationError(f"Field '{field}' is required")

        username = require_non_empty(data["username"], "username")
        password = require_min_length(str(data["password"]), "Password", MIN_PASSWORD_LENGTH)
        name = require_non_empty(data["name"], "name")
        email = require_email(data["email"])
        phone = require_phone(str(data["phone"]))
        department = require_non_empty(data["department"], "department")
        office_id = require_int(data["primary_office"], "primary_office")

        if not self._offices.get_by_id(office_id):
            raise OfficeNotFoundError("Office not found")

        if self._employees.exists_username_or_email(username, email):
            raise ConflictError("Username or email already exists")

        try:
            employee_id = self._employees.create(
                NewEmployee(
                    username=username,
                    password_hash=generate_password_hash(password),
                    name=name,
                    email=email,
                    phone=phone,
                    department=department,
                    primary_office_id=office_id,
                    role=Role.EMPLOYEE,
                )
            )
        except DuplicateRecordError:
            # Lost a race against a concurrent registration with the same username/email.
            raise ConflictError("Username or email already exists")

        logger.info("Employee %s registered (%s)", employee_id, username)
        return employee_id

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise EmployeeNotFoundError("Employee not found")
        return employee

    def update_employee(self, employee_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, ("name", "role"))
        current = self.get_employee(employee_id)

        name = require_non_empty(data["name"], "name")
        role = self._parse_role(data["role"])
        if current.name == name and current.role == role:
            return

        self._employees.update_profile(current.employee_id, name=name, role=role)
        logger.info("Employee %s updated (role=%s)", current.employee_id, role.value)

    def deactivate_employee(self, employee_id: int) -> None:
        employee = self.get_employee(employee_id)
        if employee.is_active:
            self._employees.set_active(employee.employee_id, is_active=False)
            logger.info("Employee %s deactivated", employee.employee_id)

    @staticmethod
    def _parse_role(value: Any) -> Role:
        try:
            return Role(str(value).strip().lower())
        except ValueError:
            raise ValidationError("Role must be 'employee' or 'admin'")
