from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for admin-only endpoints."""

    EMPLOYEE = "employee"
    ADMIN = "admin"


class AttendanceType(str, Enum):
    """Where the employee is working from on a given day."""

    OFFICE = "office"
    WFH = "wfh"
    CLIENT = "client"


class AttendanceState(str, Enum):
    """Lifecycle of one (employee, date) attendance slot."""

    ABSENT = "ABSENT"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class WFHRequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
