from __future__ import annotations

import os
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

os.environ.setdefault("APP_ENV", "testing")

from attendance_tracker.attendance.model import AttendanceRecord, MonthlyStats, NewCheckIn
from attendance_tracker.container import PolicySettings, assemble_container
from attendance_tracker.core.enums import AttendanceType, Role, WFHRequestStatus
from attendance_tracker.core.exceptions import DuplicateRecordError
from attendance_tracker.employees.model import Employee, NewEmployee
from attendance_tracker.offices.model import Office, OfficeDraft
from attendance_tracker.wfh.model import WFHRequest


class InMemoryAttendance:
    """Keeps the (employee, date) uniqueness and the open-record check-out guard of the MySQL table."""

    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self.checkout_calls = 0

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_employee_date.get((employee_id, work_date))

    def create_checkin(self, draft: NewCheckIn) -> int:
        key = (draft.employee_id, draft.work_date)
        if key in self._by_employee_date:
            raise DuplicateRecordError("Duplicate entry for key 'uq_attendance_employee_date'")

        self._id += 1
        self._by_employee_date[key] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=draft.employee_id,
            work_date=draft.work_date,
            check_in_time=draft.check_in_time,
            check_in_type=draft.check_in_type,
            status=draft.status,
            office_id=draft.office_id,
            check_in_location=draft.location,
            check_in_photo=draft.photo,
        )
        return self._id

    def complete_checkout(self, *, attendance_id, check_out_time, location, photo, work_hours, is_half_day) -> bool:
        self.checkout_calls += 1
        for key, rec in self._by_employee_date.items():
            if rec.attendance_id == attendance_id and rec.check_out_time is None:
                self._by_employee_date[key] = replace(
                    rec,
                    check_out_time=check_out_time,
                    check_out_location=location,
                    check_out_photo=photo,
                    work_hours=work_hours,
                    is_half_day=is_half_day,
                )
                return True
        return False

    def list_records(self, *, employee_id=None, start_date=None, end_date=None):
        items = [
            r
            for r in self._by_employee_date.values()
            if (employee_id is None or r.employee_id == employee_id)
            and (start_date is None or r.work_date >= start_date)
            and (end_date is None or r.work_date <= end_date)
        ]
        items.sort(key=lambda r: (r.work_date, r.attendance_id), reverse=True)
        return items

    def count_by_type_in_month(self, *, employee_id: int, check_in_type: AttendanceType, year: int, month: int) -> int:
        return sum(
            1
            for r in self._by_employee_date.values()
            if r.employee_id == employee_id
            and r.check_in_type == check_in_type
            and r.work_date.year == year
            and r.work_date.month == month
        )

    def get_monthly_stats(self, *, employee_id: int, year: int, month: int) -> Optional[MonthlyStats]:
        rows = [
            r
            for r in self._by_employee_date.values()
            if r.employee_id == employee_id and r.work_date.year == year and r.work_date.month == month
        ]
        if not rows:
            return None
        return MonthlyStats(
            employee_id=employee_id,
            year=year,
            month=month,
            total_days=len(rows),
            total_hours=round(sum(r.work_hours or 0.0 for r in rows), 2),
            half_days=sum(1 for r in rows if r.is_half_day),
            wfh_days=sum(1 for r in rows if r.check_in_type == AttendanceType.WFH),
            office_days=sum(1 for r in rows if r.check_in_type == AttendanceType.OFFICE),
            client_days=sum(1 for r in rows if r.check_in_type == AttendanceType.CLIENT),
        )

    def seed(self, record: AttendanceRecord) -> None:
        self._id = max(self._id, record.attendance_id)
        self._by_employee_date[(record.employee_id, record.work_date)] = record


class InMemoryOffices:
    def __init__(self, offices: Optional[list[Office]] = None):
        self.offices: dict[int, Office] = {o.office_id: o for o in offices or []}
        self.create_calls: list[tuple[OfficeDraft, list[str]]] = []

    def get_by_id(self, office_id: int) -> Optional[Office]:
        return self.offices.get(office_id)

    def list_all(self):
        return sorted(self.offices.values(), key=lambda o: o.name)

    def list_accessible(self, department: str):
        return [o for o in self.list_all() if o.is_active and department in o.departments]

    def create_with_access(self, draft: OfficeDraft, departments) -> int:
        self.create_calls.append((draft, list(departments)))
        office_id = max(self.offices, default=0) + 1
        self.offices[office_id] = Office(
            office_id=office_id,
            name=draft.name,
            address=draft.address,
            latitude=draft.latitude,
            longitude=draft.longitude,
            radius_meters=draft.radius_meters,
            is_active=draft.is_active,
            departments=tuple(departments),
        )
        return office_id

    def update(self, office_id: int, draft: OfficeDraft, departments=None) -> bool:
        current = self.offices.get(office_id)
        if not current:
            return False
        self.offices[office_id] = replace(
            current,
            name=draft.name,
            address=draft.address,
            latitude=draft.latitude,
            longitude=draft.longitude,
            radius_meters=draft.radius_meters,
            is_active=draft.is_active,
            departments=tuple(departments) if departments is not None else current.departments,
        )
        return True

    def set_active(self, office_id: int, *, is_active: bool) -> bool:
        current = self.offices.get(office_id)
        if not current:
            return False
        self.offices[office_id] = replace(current, is_active=is_active)
        return True


class InMemoryEmployees:
    def __init__(self, employees: Optional[list[Employee]] = None):
        self.employees: dict[int, Employee] = {e.employee_id: e for e in employees or []}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def get_by_username(self, username: str) -> Optional[Employee]:
        return next((e for e in self.employees.values() if e.username == username), None)

    def exists_username_or_email(self, username: str, email: str) -> bool:
        return any(e.username == username or e.email == email for e in self.employees.values())

    def create(self, new: NewEmployee) -> int:
        employee_id = max(self.employees, default=0) + 1
        self.employees[employee_id] = Employee(
            employee_id=employee_id,
            username=new.username,
            password_hash=new.password_hash,
            name=new.name,
            email=new.email,
            phone=new.phone,
            department=new.department,
            primary_office_id=new.primary_office_id,
            role=new.role,
        )
        return employee_id

    def list_all(self):
        return sorted(self.employees.values(), key=lambda e: e.name)

    def update_profile(self, employee_id: int, *, name: str, role: Role) -> bool:
        self.employees[employee_id] = replace(self.employees[employee_id], name=name, role=role)
        return True

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        self.employees[employee_id] = replace(self.employees[employee_id], is_active=is_active)
        return True


class InMemoryWFHRequests:
    def __init__(self):
        self.requests: dict[int, WFHRequest] = {}

    def create(self, *, employee_id: int, requested_date: date, reason: str) -> int:
        if any(r.employee_id == employee_id and r.requested_date == requested_date for r in self.requests.values()):
            raise DuplicateRecordError("Duplicate entry for key 'uq_wfh_employee_date'")
        request_id = len(self.requests) + 1
        self.requests[request_id] = WFHRequest(
            request_id=request_id,
            employee_id=employee_id,
            requested_date=requested_date,
            reason=reason,
            status=WFHRequestStatus.PENDING,
            created_at=datetime(2024, 5, 1, 8, 0, 0),
        )
        return request_id

    def list_for_employee(self, employee_id: int):
        items = [r for r in self.requests.values() if r.employee_id == employee_id]
        return sorted(items, key=lambda r: r.requested_date, reverse=True)


HEAD_OFFICE = Office(
    office_id=7,
    name="Head Office",
    address="MG Road, Bengaluru",
    latitude=12.9716,
    longitude=77.5946,
    radius_meters=200,
    departments=("IT",),
)


def make_employee(employee_id: int = 42, *, username: str = "asha", password: str = "secret1", role: Role = Role.EMPLOYEE, is_active: bool = True) -> Employee:
    return Employee(
        employee_id=employee_id,
        username=username,
        password_hash=generate_password_hash(password),
        name=username.title(),
        email=f"{username}@example.com",
        phone="9876543210",
        department="IT",
        primary_office_id=HEAD_OFFICE.office_id,
        role=role,
        is_active=is_active,
    )


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def offices_repo():
    return InMemoryOffices([HEAD_OFFICE])


@pytest.fixture
def employees_repo():
    return InMemoryEmployees(
        [
            make_employee(42, username="asha"),
            make_employee(1, username="admin", password="admin123", role=Role.ADMIN),
        ]
    )


@pytest.fixture
def wfh_repo():
    return InMemoryWFHRequests()


@pytest.fixture
def container(attendance_repo, offices_repo, employees_repo, wfh_repo):
    return assemble_container(
        employees_repo=employees_repo,
        offices_repo=offices_repo,
        attendance_repo=attendance_repo,
        wfh_repo=wfh_repo,
        settings=PolicySettings(wfh_monthly_limit=1, half_day_hours=4.0, timezone="Asia/Kolkata"),
    )


@pytest.fixture
def app(container):
    from attendance_tracker.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["employee_id"] = 1
        sess["role"] = Role.ADMIN.value
    return client
