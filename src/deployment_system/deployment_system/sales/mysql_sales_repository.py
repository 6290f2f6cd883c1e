from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SalesRecord
from .repository import SalesRepository


class MySQLSalesRepository(SalesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_date(self, *, work_date: date, records: Sequence[SalesRecord]) -> int:
        # Single transaction: db_cursor commits only if both statements succeed.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sales_records WHERE work_date=%s", (work_date,))
            if records:
                cur.executemany(
                    "INSERT INTO sales_records(work_date, time, forecast) VALUES(%s,%s,%s)",
                    [(r.work_date, r.time, r.forecast) for r in records],
                )
            return len(records)

    def list_for_date(self, *, work_date: date) -> Sequence[SalesRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT work_date, time, forecast FROM sales_records WHERE work_date=%s ORDER BY time",
                (work_date,),
            )
            return [
                SalesRecord(work_date=r["work_date"], time=r["time"], forecast=float(r["forecast"]))
                for r in fetchall(cur)
            ]
