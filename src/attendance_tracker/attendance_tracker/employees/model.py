from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee account.

    Note: Plain data object (no DB access code).
    """

    employee_id: int
    username: str
    password_hash: str
    name: str
    email: str
    phone: Optional[str]
    department: Optional[str]
    primary_office_id: Optional[int]
    role: Role
    is_active: bool = True

    def to_public_dict(self) -> dict:
        """Serializable view without the password hash."""

        return {
            "id": self.employee_id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "primary_office": self.primary_office_id,
            "role": self.role.value,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class NewEmployee:
    username: str
    password_hash: str
    name: str
    email: str
    phone: str
    department: str
    primary_office_id: int
    role: Role = Role.EMPLOYEE
