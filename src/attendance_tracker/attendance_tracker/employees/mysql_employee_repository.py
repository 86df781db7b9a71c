from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, username, password_hash, name, email, phone, department, primary_office_id, role, is_active"


def _to_employee(row: Dict[str, Any]) -> Employee:
    office = row.get("primary_office_id")
    return Employee(
        employee_id=int(row["employee_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        department=row.get("department"),
        primary_office_id=int(office) if office is not None else None,
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE username=%s", (username,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def exists_username_or_email(self, username: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id FROM employees WHERE username=%s OR email=%s LIMIT 1",
                (username, email),
            )
            return fetchone(cur) is not None

    def create(self, new: NewEmployee) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(username, password_hash, name, email, phone, department, primary_office_id, role, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (
                    new.username,
                    new.password_hash,
                    new.name,
                    new.email,
                    new.phone,
                    new.department,
                    new.primary_office_id,
                    new.role.value,
                ),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def update_profile(self, employee_id: int, *, name: str, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET name=%s, role=%s WHERE employee_id=%s",
                (name, role.value, int(employee_id)),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s WHERE employee_id=%s",
                (1 if is_active else 0, int(employee_id)),
            )
            return cur.rowcount > 0
