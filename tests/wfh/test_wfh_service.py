from datetime import date, datetime

import pytest

from attendance_tracker.core.exceptions import ConflictError, ValidationError, WFHLimitExceededError


def _wfh_day(container, work_date: date):
    container.attendance_service.mark_attendance(
        employee_id=42,
        work_date=work_date,
        check_in_time=datetime(work_date.year, work_date.month, work_date.day, 9, 0),
        check_in_type="wfh",
        status="present",
    )


def test_eligible_when_no_wfh_this_month(container):
    result = container.wfh_eligibility_service.check_eligibility(42, date(2024, 5, 15))
    assert result.to_dict() == {"current_count": 0, "max_limit": 1, "can_request": True}


def test_wfh_day_in_same_month_uses_the_quota(container):
    _wfh_day(container, date(2024, 5, 2))

    result = container.wfh_eligibility_service.check_eligibility(42, date(2024, 5, 31))
    assert result.current_count == 1
    assert result.can_request is False


def test_other_months_and_office_days_do_not_count(container):
    _wfh_day(container, date(2024, 4, 30))
    container.attendance_service.mark_attendance(
        employee_id=42,
        work_date=date(2024, 5, 2),
        check_in_time=datetime(2024, 5, 2, 9, 0),
        check_in_type="office",
        status="present",
        office_id=7,
    )

    assert container.wfh_eligibility_service.check_eligibility(42, date(2024, 5, 10)).can_request is True


def test_create_and_list_requests(container):
    svc = container.wfh_request_service
    first = svc.create_request(employee_id=42, requested_date=date(2024, 5, 10), reason="Plumber visit")
    second = svc.create_request(employee_id=42, requested_date=date(2024, 5, 11), reason="Internet install")

    assert first != second
    listed = svc.list_requests(42)
    assert [r.requested_date.day for r in listed] == [11, 10]
    assert listed[0].to_dict()["status"] == "pending"


def test_duplicate_request_for_same_date(container):
    svc = container.wfh_request_service
    svc.create_request(employee_id=42, requested_date=date(2024, 5, 10), reason="Plumber visit")

    with pytest.raises(ConflictError):
        svc.create_request(employee_id=42, requested_date=date(2024, 5, 10), reason="Again")


def test_request_rejected_when_quota_used(container):
    _wfh_day(container, date(2024, 5, 2))
    with pytest.raises(WFHLimitExceededError):
        container.wfh_request_service.create_request(employee_id=42, requested_date=date(2024, 5, 20), reason="Travel")


def test_request_needs_a_reason(container):
    with pytest.raises(ValidationError):
        container.wfh_request_service.create_request(employee_id=42, requested_date=date(2024, 5, 20), reason="  ")
