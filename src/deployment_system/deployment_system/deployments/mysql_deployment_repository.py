from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import ShiftClassification
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, format_mysql_time
from .model import Deployment
from .repository import DeploymentRepository


class MySQLDeploymentRepository(DeploymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists(self, *, staff_id: int, work_date: date, shift_type: ShiftClassification) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT deployment_id FROM deployments
                WHERE staff_id=%s AND work_date=%s AND shift_type=%s
                """,
                (int(staff_id), work_date, shift_type.value),
            )
            return fetchone(cur) is not None

    def count_for(self, *, work_date: date, shift_type: ShiftClassification) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM deployments WHERE work_date=%s AND shift_type=%s",
                (work_date, shift_type.value),
            )
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def create(
        self,
        *,
        staff_id: int,
        work_date: date,
        shift_type: ShiftClassification,
        start_time: str,
        end_time: str,
        break_minutes: int = 0,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO deployments(staff_id, work_date, shift_type, start_time, end_time, position, break_minutes)
                VALUES(%s,%s,%s,%s,%s,'',%s)
                """,
                (int(staff_id), work_date, shift_type.value, start_time, end_time, int(break_minutes)),
            )
            return int(cur.lastrowid)

    def list_for(self, *, work_date: date, shift_type: ShiftClassification) -> Sequence[Deployment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT deployment_id, staff_id, work_date, shift_type, start_time, end_time, position, break_minutes
                FROM deployments
                WHERE work_date=%s AND shift_type=%s
                ORDER BY start_time ASC, deployment_id ASC
                """,
                (work_date, shift_type.value),
            )
            return [
                Deployment(
                    deployment_id=int(r["deployment_id"]),
                    staff_id=int(r["staff_id"]),
                    work_date=r["work_date"],
                    shift_type=ShiftClassification(r["shift_type"]),
                    start_time=format_mysql_time(r["start_time"]),
                    end_time=format_mysql_time(r["end_time"]),
                    position=r.get("position") or "",
                    break_minutes=int(r.get("break_minutes") or 0),
                )
                for r in fetchall(cur)
            ]
