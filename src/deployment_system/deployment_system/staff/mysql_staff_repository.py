from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StaffMember
from .repository import StaffRepository


def _to_staff(r: dict) -> StaffMember:
    return StaffMember(
        staff_id=int(r["staff_id"]),
        name=r["name"],
        is_under_18=bool(r.get("is_under_18")),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, is_under_18, is_active
                FROM staff
                WHERE staff_id=%s
                """,
                (int(staff_id),),
            )
            r = fetchone(cur)
            return _to_staff(r) if r else None

    def list_all(self) -> Sequence[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, name, is_under_18, is_active
                FROM staff
                ORDER BY staff_id
                """
            )
            return [_to_staff(r) for r in fetchall(cur)]
