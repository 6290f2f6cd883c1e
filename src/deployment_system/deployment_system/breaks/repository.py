from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import ShiftClassification
from .model import ScheduledBreak


class BreakRepository(Protocol):
    def list_for(self, *, work_date: date, shift_type: ShiftClassification) -> Sequence[ScheduledBreak]:
        raise NotImplementedError

    def create_many(self, breaks: Sequence[ScheduledBreak]) -> int:
        """Insert breaks. Returns the number of rows written."""

        raise NotImplementedError
