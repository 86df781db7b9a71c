from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .location import decode_location, encode_location
from .model import AttendanceRecord, Location, MonthlyStats, NewCheckIn
from .repository import AttendanceRepository

_SELECT = """
    SELECT ar.attendance_id, ar.employee_id, ar.work_date, ar.check_in_time, ar.check_in_type,
           ar.check_in_location, ar.check_in_photo, ar.office_id, ar.status,
           ar.check_out_time, ar.check_out_location, ar.check_out_photo,
           ar.work_hours, ar.is_half_day, ar.created_at,
           ol.name AS office_name, ol.address AS office_address,
           e.name AS employee_name, e.department
    FROM attendance_records ar
    JOIN employees e ON e.employee_id = ar.employee_id
    LEFT JOIN office_locations ol ON ol.office_id = ar.office_id
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    office_id = r.get("office_id")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_type=AttendanceType(r["check_in_type"]),
        status=r["status"],
        office_id=int(office_id) if office_id is not None else None,
        check_in_location=decode_location(r.get("check_in_location")),
        check_in_photo=r.get("check_in_photo"),
        check_out_time=r.get("check_out_time"),
        check_out_location=decode_location(r.get("check_out_location")),
        check_out_photo=r.get("check_out_photo"),
        work_hours=as_float(r.get("work_hours")),
        is_half_day=bool(r.get("is_half_day") or False),
        created_at=r.get("created_at"),
        office_name=r.get("office_name"),
        office_address=r.get("office_address"),
        employee_name=r.get("employee_name"),
        department=r.get("department"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE ar.employee_id=%s AND ar.work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(self, draft: NewCheckIn) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, work_date, check_in_time, check_in_type, status,
                    office_id, check_in_location, check_in_photo
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    draft.employee_id,
                    draft.work_date,
                    draft.check_in_time,
                    draft.check_in_type.value,
                    draft.status,
                    draft.office_id,
                    encode_location(draft.location),
                    draft.photo,
                ),
            )
            return int(cur.lastrowid)

    def complete_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        location: Optional[Location],
        photo: Optional[str],
        work_hours: float,
        is_half_day: bool,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, check_out_location=%s, check_out_photo=%s,
                    work_hours=%s, is_half_day=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (
                    check_out_time,
                    encode_location(location),
                    photo,
                    work_hours,
                    1 if is_half_day else 0,
                    int(attendance_id),
                ),
            )
            return cur.rowcount > 0

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            clauses.append("ar.employee_id=%s")
            params.append(int(employee_id))
        if start_date is not None:
            clauses.append("ar.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("ar.work_date <= %s")
            params.append(end_date)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + where + " ORDER BY ar.work_date DESC, ar.created_at DESC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_by_type_in_month(self, *, employee_id: int, check_in_type: AttendanceType, year: int, month: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS cnt
                FROM attendance_records
                WHERE employee_id=%s AND check_in_type=%s
                  AND YEAR(work_date)=%s AND MONTH(work_date)=%s
                """,
                (int(employee_id), check_in_type.value, int(year), int(month)),
            )
            r = fetchone(cur)
            return int(r["cnt"]) if r else 0

    def get_monthly_stats(self, *, employee_id: int, year: int, month: int) -> Optional[MonthlyStats]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, year, month, total_days, total_hours, half_days,
                       wfh_days, office_days, client_days
                FROM monthly_attendance_stats
                WHERE employee_id=%s AND year=%s AND month=%s
                """,
                (int(employee_id), int(year), int(month)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlyStats(
                employee_id=int(r["employee_id"]),
                year=int(r["year"]),
                month=int(r["month"]),
                total_days=int(r.get("total_days") or 0),
                total_hours=round(as_float(r.get("total_hours")) or 0.0, 2),
                half_days=int(r.get("half_days") or 0),
                wfh_days=int(r.get("wfh_days") or 0),
                office_days=int(r.get("office_days") or 0),
                client_days=int(r.get("client_days") or 0),
            )
