from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.http import json_body, json_endpoint, query_date, query_int, success
from ..common.validators import require_fields, require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/wfh-eligibility", methods=["GET"], endpoint="wfh_eligibility")
    @json_endpoint("Failed to check WFH eligibility")
    def wfh_eligibility():
        employee_id = query_int("employee_id", required=True)
        work_date = query_date("date") or today_local(container.settings.timezone)

        result = container.wfh_eligibility_service.check_eligibility(employee_id, work_date)
        return success(**result.to_dict())

    @app.route("/api/wfh-requests", methods=["POST"], endpoint="wfh_request_create")
    @json_endpoint("Failed to submit WFH request")
    def wfh_request_create():
        data = json_body()
        require_fields(data, ("employee_id", "date", "reason"))

        request_id = container.wfh_request_service.create_request(
            employee_id=require_int(data["employee_id"], "employee_id"),
            requested_date=parse_iso_date(data["date"]),
            reason=data["reason"],
        )
        return success(201, message="WFH request submitted", request_id=request_id)

    @app.route("/api/wfh-requests", methods=["GET"], endpoint="wfh_request_list")
    @json_endpoint("Failed to fetch WFH requests")
    def wfh_request_list():
        employee_id = query_int("employee_id", required=True)
        requests = container.wfh_request_service.list_requests(employee_id)
        return success(requests=[r.to_dict() for r in requests])
