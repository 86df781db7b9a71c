from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HALF_DAY_HOURS, DEFAULT_TIMEZONE
from ..core.enums import AttendanceState, AttendanceType
from ..core.exceptions import (
    AlreadyCheckedOutError,
    AlreadyMarkedError,
    DuplicateRecordError,
    EmployeeNotFoundError,
    NotCheckedInError,
    ValidationError,
)
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .location import parse_location
from .model import AttendanceRecord, CheckOutResult, MarkResult, MonthlyStats, NewCheckIn
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def elapsed_hours(check_in_time: datetime, check_out_time: datetime) -> float:
    return (check_out_time - check_in_time).total_seconds() / 3600.0


def compute_work_hours(check_in_time: datetime, check_out_time: datetime) -> float:
    """Elapsed time in fractional hours, rounded to 2 decimals."""

    return round(elapsed_hours(check_in_time, check_out_time), 2)


class AttendanceService:
    """Attendance state machine: ABSENT -> CHECKED_IN -> CHECKED_OUT per (employee, date).

    The (employee, date) unique key and the conditional check-out update are
    enforced by the repository; the pre-checks here exist to give the caller a
    specific error without touching the database twice.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        employees: EmployeeRepository,
        strategy_factory: AttendanceStrategyFactory,
        half_day_hours: float = DEFAULT_HALF_DAY_HOURS,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory
        self._half_day_hours = float(half_day_hours)
        self._timezone = timezone

    def state_of(self, employee_id: int, work_date: date) -> AttendanceState:
        record = self._attendance.get_for_employee_and_date(int(employee_id), work_date)
        return record.state if record else AttendanceState.ABSENT

    def mark_attendance(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in_time: datetime,
        check_in_type: Any,
        status: str,
        office_id: Optional[int] = None,
        location: Any = None,
        photo: Optional[str] = None,
    ) -> MarkResult:
        draft = NewCheckIn(
            employee_id=int(employee_id),
            work_date=work_date,
            check_in_time=check_in_time,
            check_in_type=self._parse_type(check_in_type),
            status=require_non_empty(status, "status"),
            office_id=int(office_id) if office_id is not None else None,
            location=parse_location(location),
            photo=photo or None,
        )
        if not self._employees.get_by_id(draft.employee_id):
            raise EmployeeNotFoundError("Employee not found")
        if self._attendance.get_for_employee_and_date(draft.employee_id, draft.work_date):
            raise AlreadyMarkedError("Attendance already marked for today")

        self._factory.for_checkin(draft.check_in_type).validate_checkin(draft)

        try:
            record_id = self._attendance.create_checkin(draft)
        except DuplicateRecordError:
            # A concurrent check-in for the same day won the insert.
            raise AlreadyMarkedError("Attendance already marked for today")

        logger.info(
            "Employee %s checked in (%s) on %s, record %s",
            draft.employee_id,
            draft.check_in_type.value,
            draft.work_date,
            record_id,
        )
        return MarkResult(record_id=record_id, message="Attendance marked successfully")

    def check_out(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_out_time: datetime,
        location: Any = None,
        photo: Optional[str] = None,
    ) -> CheckOutResult:
        record = self._attendance.get_for_employee_and_date(int(employee_id), work_date)
        if not record:
            raise NotCheckedInError("You have not checked in for this date")
        if record.state == AttendanceState.CHECKED_OUT:
            raise AlreadyCheckedOutError("You have already checked out for this date")

        if check_out_time <= record.check_in_time:
            raise ValidationError("Check-out time must be after check-in time")

        # Unrounded hours against the threshold.
        is_half_day = elapsed_hours(record.check_in_time, check_out_time) < self._half_day_hours
        work_hours = compute_work_hours(record.check_in_time, check_out_time)

        updated = self._attendance.complete_checkout(
            attendance_id=record.attendance_id,
            check_out_time=check_out_time,
            location=parse_location(location),
            photo=photo or None,
            work_hours=work_hours,
            is_half_day=is_half_day,
        )
        if not updated:
            raise AlreadyCheckedOutError("You have already checked out for this date")

        logger.info("Employee %s checked out on %s after %.2f h", employee_id, work_date, work_hours)
        message = "Checked out (half day)" if is_half_day else "Checked out successfully"
        return CheckOutResult(work_hours=work_hours, is_half_day=is_half_day, message=message)

    def get_today_attendance(self, employee_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(int(employee_id), self.today())

    def get_attendance_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        if start_date and end_date and start_date > end_date:
            raise ValidationError("start_date must not be after end_date")
        return self._attendance.list_records(employee_id=employee_id, start_date=start_date, end_date=end_date)

    def get_monthly_stats(self, employee_id: int, *, year: Optional[int] = None, month: Optional[int] = None) -> MonthlyStats:
        today = self.today()
        year = int(year or today.year)
        month = int(month or today.month)
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")

        stats = self._attendance.get_monthly_stats(employee_id=int(employee_id), year=year, month=month)
        return stats or MonthlyStats(employee_id=int(employee_id), year=year, month=month)

    def today(self) -> date:
        return today_local(self._timezone)

    @staticmethod
    def _parse_type(value: Any) -> AttendanceType:
        try:
            return AttendanceType(str(value).strip().lower())
        except ValueError:
            raise ValidationError("Attendance type must be one of: office, wfh, client")
