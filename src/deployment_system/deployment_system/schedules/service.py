from __future__ import annotations

import logging
from datetime import date

from ..core.exceptions import ValidationError
from .parser import shifts_for_week
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleImportService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def import_week_line(self, *, schedule_id: int, employee_id: int, line: str, week_start: date) -> int:
        """Store the working days of one rota line. Returns how many shifts were added."""
        employee = self._schedules.get_employee(employee_id=int(employee_id))
        if not employee or employee.schedule_id != int(schedule_id):
            raise ValidationError("Schedule employee not found")
        if week_start.weekday() != 0:
            raise ValidationError("week_start must be a Monday")

        parsed = shifts_for_week(line, week_start)
        for s in parsed:
            self._schedules.add_shift(
                schedule_id=int(schedule_id),
                employee_id=employee.employee_id,
                shift_date=s.shift_date,
                start_time=s.start,
                end_time=s.end,
            )
        logger.info("Imported %d shifts for %s (schedule %s)", len(parsed), employee.name, schedule_id)
        return len(parsed)
