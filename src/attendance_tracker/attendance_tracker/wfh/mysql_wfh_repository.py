from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import WFHRequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import WFHRequest
from .repository import WFHRequestRepository


class MySQLWFHRequestRepository(WFHRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_id: int, requested_date: date, reason: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO wfh_requests(employee_id, requested_date, reason, status)
                VALUES(%s,%s,%s,%s)
                """,
                (int(employee_id), requested_date, reason, WFHRequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def list_for_employee(self, employee_id: int) -> Sequence[WFHRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, employee_id, requested_date, reason, status, created_at
                FROM wfh_requests
                WHERE employee_id=%s
                ORDER BY requested_date DESC, created_at DESC
                """,
                (int(employee_id),),
            )
            return [
                WFHRequest(
                    request_id=int(r["request_id"]),
                    employee_id=int(r["employee_id"]),
                    requested_date=r["requested_date"],
                    reason=r["reason"],
                    status=WFHRequestStatus(r["status"]),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
