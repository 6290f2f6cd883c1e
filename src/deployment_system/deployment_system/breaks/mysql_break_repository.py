from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import BreakType, ShiftClassification
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ScheduledBreak
from .repository import BreakRepository


class MySQLBreakRepository(BreakRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for(self, *, work_date: date, shift_type: ShiftClassification) -> Sequence[ScheduledBreak]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT break_id, deployment_id, staff_id, work_date, shift_type,
                       break_type, duration_minutes, scheduled_start, note
                FROM break_schedules
                WHERE work_date=%s AND shift_type=%s
                ORDER BY scheduled_start ASC
                """,
                (work_date, shift_type.value),
            )
            return [
                ScheduledBreak(
                    break_id=int(r["break_id"]),
                    deployment_id=int(r["deployment_id"]),
                    staff_id=int(r["staff_id"]),
                    work_date=r["work_date"],
                    shift_type=ShiftClassification(r["shift_type"]),
                    break_type=BreakType(r["break_type"]),
                    duration_minutes=int(r["duration_minutes"]),
                    scheduled_start=r["scheduled_start"],
                    note=r.get("note"),
                )
                for r in fetchall(cur)
            ]

    def create_many(self, breaks: Sequence[ScheduledBreak]) -> int:
        if not breaks:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO break_schedules(
                    deployment_id, staff_id, work_date, shift_type,
                    break_type, duration_minutes, scheduled_start, note
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (
                        b.deployment_id,
                        b.staff_id,
                        b.work_date,
                        b.shift_type.value,
                        b.break_type.value,
                        b.duration_minutes,
                        b.scheduled_start,
                        b.note,
                    )
                    for b in breaks
                ],
            )
            return len(breaks)
