from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..common.http import json_body, json_endpoint, query_date, query_int, success
from ..common.validators import require_fields, require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service
    tz = container.settings.timezone

    @app.route("/api/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    @json_endpoint("Failed to mark attendance")
    def mark_attendance():
        data = json_body()
        require_fields(data, ("employee_id", "date", "check_in", "type", "status"))

        work_date = parse_iso_date(data["date"])
        office_id = data.get("office_id")
        result = svc.mark_attendance(
            employee_id=require_int(data["employee_id"], "employee_id"),
            work_date=work_date,
            check_in_time=parse_iso_datetime(data["check_in"], work_date=work_date, tz_name=tz),
            check_in_type=data["type"],
            status=data["status"],
            office_id=require_int(office_id, "office_id") if office_id not in (None, "") else None,
            location=data.get("location"),
            photo=data.get("photo"),
        )
        return success(201, message=result.message, record_id=result.record_id)

    @app.route("/api/check-out", methods=["POST"], endpoint="check_out")
    @json_endpoint("Failed to record check-out")
    def check_out():
        data = json_body()
        require_fields(data, ("employee_id", "date", "check_out"))

        work_date = parse_iso_date(data["date"])
        result = svc.check_out(
            employee_id=require_int(data["employee_id"], "employee_id"),
            work_date=work_date,
            check_out_time=parse_iso_datetime(data["check_out"], work_date=work_date, tz_name=tz),
            location=data.get("location"),
            photo=data.get("photo"),
        )
        return success(message=result.message, work_hours=result.work_hours, is_half_day=result.is_half_day)

    @app.route("/api/today-attendance", methods=["GET"], endpoint="today_attendance")
    @json_endpoint("Failed to fetch today's attendance")
    def today_attendance():
        employee_id = query_int("employee_id", required=True)
        record = svc.get_today_attendance(employee_id)
        return success(record=record.to_dict() if record else None)

    @app.route("/api/attendance-records", methods=["GET"], endpoint="attendance_records")
    @json_endpoint("Failed to fetch attendance records")
    def attendance_records():
        records = svc.get_attendance_records(
            employee_id=query_int("employee_id"),
            start_date=query_date("start_date"),
            end_date=query_date("end_date"),
        )
        return success(records=[r.to_dict() for r in records])

    @app.route("/api/monthly-stats", methods=["GET"], endpoint="monthly_stats")
    @json_endpoint("Failed to fetch monthly statistics")
    def monthly_stats():
        employee_id = query_int("employee_id", required=True)
        stats = svc.get_monthly_stats(employee_id, year=query_int("year"), month=query_int("month"))
        return success(stats=stats.to_dict())
