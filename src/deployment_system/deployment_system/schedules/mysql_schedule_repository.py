from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ScheduleEmployee, ScheduleShift
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_unassigned_shifts(self, *, schedule_id: int) -> Sequence[ScheduleShift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ss.shift_id, ss.schedule_id, ss.employee_id, se.name AS employee_name,
                       COALESCE(ss.staff_id, se.staff_id) AS staff_id,
                       ss.shift_date, ss.start_time, ss.end_time, ss.auto_assigned_to_deployment
                FROM schedule_shifts ss
                JOIN schedule_employees se ON se.employee_id = ss.employee_id
                WHERE ss.schedule_id=%s AND ss.auto_assigned_to_deployment=0
                ORDER BY ss.shift_date ASC, ss.shift_id ASC
                """,
                (int(schedule_id),),
            )
            return [
                ScheduleShift(
                    shift_id=int(r["shift_id"]),
                    schedule_id=int(r["schedule_id"]),
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    shift_date=r["shift_date"],
                    start_time=r["start_time"],
                    end_time=r["end_time"],
                    staff_id=int(r["staff_id"]) if r.get("staff_id") else None,
                    auto_assigned=bool(r["auto_assigned_to_deployment"]),
                )
                for r in fetchall(cur)
            ]

    def mark_assigned(self, *, shift_id: int, deployment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE schedule_shifts
                SET auto_assigned_to_deployment=1, deployment_id=%s
                WHERE shift_id=%s
                """,
                (int(deployment_id), int(shift_id)),
            )
            return cur.rowcount > 0

    def list_unmatched_employees(self, *, schedule_id: int) -> Sequence[ScheduleEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, schedule_id, name, role, staff_id
                FROM schedule_employees
                WHERE schedule_id=%s AND staff_id IS NULL
                ORDER BY employee_id
                """,
                (int(schedule_id),),
            )
            return [
                ScheduleEmployee(
                    employee_id=int(r["employee_id"]),
                    schedule_id=int(r["schedule_id"]),
                    name=r["name"],
                    role=r.get("role"),
                )
                for r in fetchall(cur)
            ]

    def link_employee_to_staff(self, *, employee_id: int, staff_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE schedule_employees SET staff_id=%s WHERE employee_id=%s",
                (int(staff_id), int(employee_id)),
            )
            linked = cur.rowcount > 0
            cur.execute(
                "UPDATE schedule_shifts SET staff_id=%s WHERE employee_id=%s",
                (int(staff_id), int(employee_id)),
            )
            return linked

    def add_shift(self, *, schedule_id: int, employee_id: int, shift_date: date, start_time: str, end_time: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedule_shifts(schedule_id, employee_id, staff_id, shift_date, start_time, end_time)
                SELECT %s, employee_id, staff_id, %s, %s, %s
                FROM schedule_employees
                WHERE employee_id=%s
                """,
                (int(schedule_id), shift_date, start_time, end_time, int(employee_id)),
            )
            return int(cur.lastrowid or 0)

    def get_employee(self, *, employee_id: int) -> Optional[ScheduleEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, schedule_id, name, role, staff_id
                FROM schedule_employees
                WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return ScheduleEmployee(
                employee_id=int(r["employee_id"]),
                schedule_id=int(r["schedule_id"]),
                name=r["name"],
                role=r.get("role"),
                staff_id=int(r["staff_id"]) if r.get("staff_id") else None,
            )
