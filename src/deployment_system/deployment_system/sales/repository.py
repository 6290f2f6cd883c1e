from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import SalesRecord


class SalesRepository(Protocol):
    def replace_for_date(self, *, work_date: date, records: Sequence[SalesRecord]) -> int:
        """Drop the day's hourly forecasts and store `records` instead.

        Returns the number of rows written.
        """

        raise NotImplementedError

    def list_for_date(self, *, work_date: date) -> Sequence[SalesRecord]:
        raise NotImplementedError
