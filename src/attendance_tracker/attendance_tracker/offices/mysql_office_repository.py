from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Office, OfficeDraft
from .repository import OfficeRepository

_COLUMNS = "o.office_id, o.name, o.address, o.latitude, o.longitude, o.radius_meters, o.is_active"


def _to_office(r: Dict[str, Any], departments: Sequence[str] = ()) -> Office:
    return Office(
        office_id=int(r["office_id"]),
        name=r["name"],
        address=r.get("address"),
        latitude=as_float(r.get("latitude")),
        longitude=as_float(r.get("longitude")),
        radius_meters=as_float(r.get("radius_meters")),
        is_active=bool(r.get("is_active", True)),
        departments=tuple(departments),
    )


class MySQLOfficeRepository(OfficeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, office_id: int) -> Optional[Office]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM office_locations o WHERE o.office_id=%s", (int(office_id),))
            r = fetchone(cur)
            if not r:
                return None
            cur.execute(
                "SELECT department FROM department_office_access WHERE office_id=%s ORDER BY department",
                (int(office_id),),
            )
            departments = [row["department"] for row in fetchall(cur)]
            return _to_office(r, departments)

    def list_all(self) -> Sequence[Office]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM office_locations o ORDER BY o.name")
            rows = fetchall(cur)
            cur.execute("SELECT office_id, department FROM department_office_access ORDER BY department")
            grants: dict[int, list[str]] = {}
            for g in fetchall(cur):
                grants.setdefault(int(g["office_id"]), []).append(g["department"])
            return [_to_office(r, grants.get(int(r["office_id"]), [])) for r in rows]

    def list_accessible(self, department: str) -> Sequence[Office]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM office_locations o
                JOIN department_office_access doa ON doa.office_id = o.office_id
                WHERE doa.department=%s AND o.is_active=1
                ORDER BY o.name
                """,
                (department,),
            )
            return [_to_office(r) for r in fetchall(cur)]

    def create_with_access(self, draft: OfficeDraft, departments: Sequence[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO office_locations(name, address, latitude, longitude, radius_meters, is_active)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    draft.name,
                    draft.address,
                    draft.latitude,
                    draft.longitude,
                    draft.radius_meters,
                    1 if draft.is_active else 0,
                ),
            )
            office_id = int(cur.lastrowid)
            self._insert_grants(cur, office_id, departments)
            return office_id

    def update(self, office_id: int, draft: OfficeDraft, departments: Optional[Sequence[str]] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT office_id FROM office_locations WHERE office_id=%s FOR UPDATE", (int(office_id),))
            if not fetchone(cur):
                return False

            cur.execute(
                """
                UPDATE office_locations
                SET name=%s, address=%s, latitude=%s, longitude=%s, radius_meters=%s, is_active=%s
                WHERE office_id=%s
                """,
                (
                    draft.name,
                    draft.address,
                    draft.latitude,
                    draft.longitude,
                    draft.radius_meters,
                    1 if draft.is_active else 0,
                    int(office_id),
                ),
            )
            if departments is not None:
                cur.execute("DELETE FROM department_office_access WHERE office_id=%s", (int(office_id),))
                self._insert_grants(cur, int(office_id), departments)
            return True

    def set_active(self, office_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE office_locations SET is_active=%s WHERE office_id=%s",
                (1 if is_active else 0, int(office_id)),
            )
            return cur.rowcount > 0

    @staticmethod
    def _insert_grants(cur, office_id: int, departments: Sequence[str]) -> None:
        if not departments:
            return
        cur.executemany(
            "INSERT INTO department_office_access(department, office_id) VALUES(%s,%s)",
            [(d, office_id) for d in departments],
        )
