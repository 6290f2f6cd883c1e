from __future__ import annotations

from datetime import date

import pytest

from src.deployment_system.deployment_system.core.exceptions import ValidationError
from src.deployment_system.deployment_system.schedules.model import ScheduleEmployee
from src.deployment_system.deployment_system.schedules.service import ScheduleImportService
from tests.fakes import InMemorySchedules


def _repo() -> InMemorySchedules:
    return InMemorySchedules(employees=[ScheduleEmployee(employee_id=7, schedule_id=1, name="Sam Lee", staff_id=1)])


def test_import_week_line_stores_working_days():
    repo = _repo()
    added = ScheduleImportService(repo).import_week_line(
        schedule_id=1, employee_id=7, line="9:00a - 5:00p  --  --  --  --  --  10:00a - 7:00p", week_start=date(2025, 1, 6)
    )

    assert added == 2
    stored = sorted(repo.shifts.values(), key=lambda s: s.shift_date)
    assert [(s.shift_date, s.start_time, s.end_time) for s in stored] == [
        (date(2025, 1, 6), "9:00 AM", "5:00 PM"),
        (date(2025, 1, 12), "10:00 AM", "7:00 PM"),
    ]
    assert all(s.staff_id == 1 for s in stored)


def test_week_must_start_on_monday():
    with pytest.raises(ValidationError):
        ScheduleImportService(_repo()).import_week_line(
            schedule_id=1, employee_id=7, line="9:00a - 5:00p", week_start=date(2025, 1, 7)
        )


@pytest.mark.parametrize("schedule_id,employee_id", [(2, 7), (1, 99)])
def test_employee_must_belong_to_schedule(schedule_id, employee_id):
    with pytest.raises(ValidationError):
        ScheduleImportService(_repo()).import_week_line(
            schedule_id=schedule_id, employee_id=employee_id, line="9:00a - 5:00p", week_start=date(2025, 1, 6)
        )
