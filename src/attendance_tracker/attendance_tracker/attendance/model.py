from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceState, AttendanceType


@dataclass(frozen=True)
class Location:
    """Coordinate pair captured by the client at check-in/check-out."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def to_dict(self) -> dict:
        out = {"latitude": self.latitude, "longitude": self.longitude}
        if self.accuracy is not None:
            out["accuracy"] = self.accuracy
        return out


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per (employee, work date)."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    check_in_type: AttendanceType
    status: str
    office_id: Optional[int] = None
    check_in_location: Optional[Location] = None
    check_in_photo: Optional[str] = None
    check_out_time: Optional[datetime] = None
    check_out_location: Optional[Location] = None
    check_out_photo: Optional[str] = None
    work_hours: Optional[float] = None
    is_half_day: bool = False
    created_at: Optional[datetime] = None
    office_name: Optional[str] = None
    office_address: Optional[str] = None
    employee_name: Optional[str] = None
    department: Optional[str] = None

    @property
    def state(self) -> AttendanceState:
        if self.check_out_time is None:
            return AttendanceState.CHECKED_IN
        return AttendanceState.CHECKED_OUT

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "check_in": self.check_in_time.isoformat(sep=" "),
            "check_in_type": self.check_in_type.value,
            "check_in_location": self.check_in_location.to_dict() if self.check_in_location else None,
            "check_in_photo": self.check_in_photo,
            "office_id": self.office_id,
            "office_name": self.office_name,
            "office_address": self.office_address,
            "status": self.status,
            "state": self.state.value,
            "check_out": self.check_out_time.isoformat(sep=" ") if self.check_out_time else None,
            "check_out_location": self.check_out_location.to_dict() if self.check_out_location else None,
            "check_out_photo": self.check_out_photo,
            "work_hours": self.work_hours,
            "is_half_day": self.is_half_day,
            "employee_name": self.employee_name,
            "department": self.department,
        }


@dataclass(frozen=True)
class NewCheckIn:
    """Write-model for the check-in insert."""

    employee_id: int
    work_date: date
    check_in_time: datetime
    check_in_type: AttendanceType
    status: str
    office_id: Optional[int] = None
    location: Optional[Location] = None
    photo: Optional[str] = None


@dataclass(frozen=True)
class MarkResult:
    record_id: int
    message: str


@dataclass(frozen=True)
class CheckOutResult:
    work_hours: float
    is_half_day: bool
    message: str


@dataclass(frozen=True)
class MonthlyStats:
    """Read-model served by the monthly_attendance_stats view."""

    employee_id: int
    year: int
    month: int
    total_days: int = 0
    total_hours: float = 0.0
    half_days: int = 0
    wfh_days: int = 0
    office_days: int = 0
    client_days: int = 0

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "year": self.year,
            "month": self.month,
            "total_days": self.total_days,
            "total_hours": self.total_hours,
            "half_days": self.half_days,
            "wfh_days": self.wfh_days,
            "office_days": self.office_days,
            "client_days": self.client_days,
        }
