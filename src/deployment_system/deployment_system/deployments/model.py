from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import ShiftClassification


@dataclass(frozen=True)
class Deployment:
    """Domain entity: one staff member on one shift of one day."""

    deployment_id: int
    staff_id: int
    work_date: date
    shift_type: ShiftClassification
    start_time: str
    end_time: str
    position: str = ""
    break_minutes: int = 0


@dataclass
class AssignmentResults:
    success: list[dict] = field(default_factory=list)
    failed: list[dict] = field(default_factory=list)
    skipped: list[dict] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {"success": self.success, "failed": self.failed, "skipped": self.skipped}
