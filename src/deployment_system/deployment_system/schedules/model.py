from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ParsedScheduleShift:
    """One working day read from a week-schedule line."""

    day: str
    start: str
    end: str
    shift_date: Optional[date] = None


@dataclass(frozen=True)
class ScheduleEmployee:
    employee_id: int
    schedule_id: int
    name: str
    role: Optional[str] = None
    staff_id: Optional[int] = None


@dataclass(frozen=True)
class ScheduleShift:
    """Imported schedule row waiting to be turned into deployments."""

    shift_id: int
    schedule_id: int
    employee_id: int
    employee_name: str
    shift_date: date
    start_time: str
    end_time: str
    staff_id: Optional[int] = None
    auto_assigned: bool = False
