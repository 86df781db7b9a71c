from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_HALF_DAY_HOURS, DEFAULT_TIMEZONE, DEFAULT_WFH_MONTHLY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService, EmployeeService
from .offices.mysql_office_repository import MySQLOfficeRepository
from .offices.repository import OfficeRepository
from .offices.service import OfficeService
from .wfh.mysql_wfh_repository import MySQLWFHRequestRepository
from .wfh.repository import WFHRequestRepository
from .wfh.service import WFHEligibilityService, WFHRequestService


@dataclass(frozen=True)
class PolicySettings:
    """Business policy values pulled from the settings module."""

    wfh_monthly_limit: int = DEFAULT_WFH_MONTHLY_LIMIT
    half_day_hours: float = DEFAULT_HALF_DAY_HOURS
    timezone: str = DEFAULT_TIMEZONE

    @classmethod
    def from_module(cls, settings) -> "PolicySettings":
        return cls(
            wfh_monthly_limit=int(getattr(settings, "WFH_MONTHLY_LIMIT", DEFAULT_WFH_MONTHLY_LIMIT)),
            half_day_hours=float(getattr(settings, "HALF_DAY_HOURS", DEFAULT_HALF_DAY_HOURS)),
            timezone=str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
        )


@dataclass(frozen=True)
class Container:
    settings: PolicySettings

    employees_repo: EmployeeRepository
    offices_repo: OfficeRepository
    attendance_repo: AttendanceRepository
    wfh_repo: WFHRequestRepository

    auth_service: AuthService
    employee_service: EmployeeService
    office_service: OfficeService
    attendance_service: AttendanceService
    wfh_eligibility_service: WFHEligibilityService
    wfh_request_service: WFHRequestService

    conn: Optional[DatabaseConnection] = None


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    offices_repo: OfficeRepository,
    attendance_repo: AttendanceRepository,
    wfh_repo: WFHRequestRepository,
    settings: PolicySettings,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    eligibility = WFHEligibilityService(attendance_repo, max_limit=settings.wfh_monthly_limit)
    attendance_service = AttendanceService(
        attendance_repo,
        employees=employees_repo,
        strategy_factory=AttendanceStrategyFactory(eligibility, offices_repo),
        half_day_hours=settings.half_day_hours,
        timezone=settings.timezone,
    )

    return Container(
        settings=settings,
        employees_repo=employees_repo,
        offices_repo=offices_repo,
        attendance_repo=attendance_repo,
        wfh_repo=wfh_repo,
        auth_service=AuthService(employees_repo),
        employee_service=EmployeeService(employees_repo, offices_repo),
        office_service=OfficeService(offices_repo),
        attendance_service=attendance_service,
        wfh_eligibility_service=eligibility,
        wfh_request_service=WFHRequestService(wfh_repo, eligibility),
        conn=conn,
    )


def build_container(*, db_config: dict, settings: PolicySettings) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        offices_repo=MySQLOfficeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        wfh_repo=MySQLWFHRequestRepository(conn),
        settings=settings,
        conn=conn,
    )
