from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import ShiftClassification
from .model import Deployment


class DeploymentRepository(Protocol):
    def exists(self, *, staff_id: int, work_date: date, shift_type: ShiftClassification) -> bool:
        raise NotImplementedError

    def count_for(self, *, work_date: date, shift_type: ShiftClassification) -> int:
        raise NotImplementedError

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
        """Insert a deployment with empty position. Returns deployment_id."""

        raise NotImplementedError

    def list_for(self, *, work_date: date, shift_type: ShiftClassification) -> Sequence[Deployment]:
        raise NotImplementedError
