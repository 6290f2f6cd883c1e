from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import BreakType, ShiftClassification


@dataclass(frozen=True)
class ScheduledBreak:
    deployment_id: int
    staff_id: int
    work_date: date
    shift_type: ShiftClassification
    break_type: BreakType
    duration_minutes: int
    scheduled_start: str  # HH:00
    note: Optional[str] = None
    break_id: Optional[int] = None
