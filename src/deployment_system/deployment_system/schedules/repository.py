from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ScheduleEmployee, ScheduleShift


class ScheduleRepository(Protocol):
    def list_unassigned_shifts(self, *, schedule_id: int) -> Sequence[ScheduleShift]:
        """Shifts of an imported schedule not yet turned into deployments."""

        raise NotImplementedError

    def mark_assigned(self, *, shift_id: int, deployment_id: int) -> bool:
        raise NotImplementedError

    def list_unmatched_employees(self, *, schedule_id: int) -> Sequence[ScheduleEmployee]:
        raise NotImplementedError

    def link_employee_to_staff(self, *, employee_id: int, staff_id: int) -> bool:
        """Set staff_id on the employee and on all of their schedule shifts."""

        raise NotImplementedError

    def add_shift(self, *, schedule_id: int, employee_id: int, shift_date, start_time: str, end_time: str) -> int:
        raise NotImplementedError

    def get_employee(self, *, employee_id: int) -> Optional[ScheduleEmployee]:
        raise NotImplementedError
