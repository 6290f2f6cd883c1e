from __future__ import annotations

from datetime import date
from typing import Optional

from src.deployment_system.deployment_system.core.enums import ShiftClassification
from src.deployment_system.deployment_system.deployments.service import AutoAssignmentService
from src.deployment_system.deployment_system.schedules.model import ScheduleEmployee, ScheduleShift
from src.deployment_system.deployment_system.staff.model import StaffMember
from tests.fakes import InMemoryDeployments, InMemorySchedules, InMemoryStaff

MONDAY = date(2025, 1, 6)
DAY = ShiftClassification.DAY_SHIFT
NIGHT = ShiftClassification.NIGHT_SHIFT


def _shift(shift_id: int, start: str, end: str, staff_id: Optional[int], name: str = "Sam Lee") -> ScheduleShift:
    return ScheduleShift(
        shift_id=shift_id,
        schedule_id=1,
        employee_id=shift_id,
        employee_name=name,
        shift_date=MONDAY,
        start_time=start,
        end_time=end,
        staff_id=staff_id,
    )


def _staff() -> InMemoryStaff:
    return InMemoryStaff(
        [
            StaffMember(staff_id=1, name="Sam Lee"),
            StaffMember(staff_id=2, name="Alex Young", is_under_18=True),
            StaffMember(staff_id=3, name="Jo Park"),
            StaffMember(staff_id=4, name="Max Old", is_active=False),
        ]
    )


def _service(shifts, deployments=None, employees=()):
    deployments = deployments or InMemoryDeployments()
    schedules = InMemorySchedules(employees=employees, shifts=shifts)
    return AutoAssignmentService(deployments, schedules, _staff()), deployments, schedules


def test_day_shift_creates_one_deployment_with_break():
    svc, deployments, schedules = _service([_shift(1, "9:00 AM", "5:00 PM", staff_id=1)])

    results = svc.auto_assign(1)

    assert results.success == [{"employee_name": "Sam Lee", "date": "2025-01-06", "shifts": ["Day Shift"]}]
    [d] = deployments.rows
    assert (d.shift_type, d.start_time, d.end_time, d.break_minutes) == (DAY, "09:00", "17:00", 30)
    assert schedules.assigned == {1: 1}


def test_both_shifts_creates_day_and_night_deployments():
    svc, deployments, schedules = _service([_shift(1, "10:00 AM", "7:00 PM", staff_id=2, name="Alex Young")])

    results = svc.auto_assign(1)

    assert results.success[0]["shifts"] == ["Day Shift", "Night Shift"]
    assert [d.shift_type for d in deployments.rows] == [DAY, NIGHT]
    assert all(d.break_minutes == 30 for d in deployments.rows)
    assert schedules.assigned == {1: 1}


def test_unmatched_employee_is_skipped():
    svc, deployments, _ = _service([_shift(1, "9:00 AM", "5:00 PM", staff_id=None, name="Nobody")])

    results = svc.auto_assign(1)

    assert results.skipped == [{"employee_name": "Nobody", "reason": "No staff member matched"}]
    assert deployments.rows == []


def test_full_shift_is_skipped():
    deployments = InMemoryDeployments()
    for staff_id in (2, 3):
        deployments.create(staff_id=staff_id, work_date=MONDAY, shift_type=DAY, start_time="09:00", end_time="17:00")
    svc, _, schedules = _service([_shift(1, "9:00 AM", "5:00 PM", staff_id=1)], deployments)

    results = svc.auto_assign(1)

    assert results.skipped == [
        {"employee_name": "Sam Lee", "date": "2025-01-06", "reason": "Maximum deployments reached for Day Shift"}
    ]
    assert deployments.count_for(work_date=MONDAY, shift_type=DAY) == 2
    assert schedules.assigned == {}


def test_both_shifts_with_full_night_keeps_day_deployment():
    deployments = InMemoryDeployments()
    for staff_id in (2, 3):
        deployments.create(staff_id=staff_id, work_date=MONDAY, shift_type=NIGHT, start_time="17:00", end_time="23:00")
    svc, _, schedules = _service([_shift(1, "10:00 AM", "7:00 PM", staff_id=1)], deployments)

    results = svc.auto_assign(1)

    assert results.skipped[0]["reason"] == "Maximum deployments reached for one or both shifts"
    assert deployments.exists(staff_id=1, work_date=MONDAY, shift_type=DAY)
    assert schedules.assigned == {}


def test_existing_deployment_is_not_duplicated():
    deployments = InMemoryDeployments()
    deployments.create(staff_id=1, work_date=MONDAY, shift_type=DAY, start_time="09:00", end_time="17:00")
    svc, _, _ = _service([_shift(1, "9:00 AM", "5:00 PM", staff_id=1)], deployments)

    results = svc.auto_assign(1)

    assert results.success == []
    assert len(results.skipped) == 1
    assert len(deployments.rows) == 1


def test_missing_staff_record_is_reported_as_failed():
    svc, _, _ = _service([_shift(1, "9:00 AM", "5:00 PM", staff_id=42)])

    results = svc.auto_assign(1)

    assert results.failed == [{"employee_name": "Sam Lee", "error": "Staff member 42 does not exist"}]


def test_max_per_shift_is_configurable():
    deployments = InMemoryDeployments()
    schedules = InMemorySchedules(
        shifts=[_shift(1, "9:00 AM", "5:00 PM", staff_id=1), _shift(2, "9:00 AM", "5:00 PM", staff_id=3, name="Jo Park")]
    )
    svc = AutoAssignmentService(deployments, schedules, _staff(), max_per_shift=1)

    results = svc.auto_assign(1)

    assert len(results.success) == 1
    assert len(results.skipped) == 1


def test_match_employees_to_staff_by_name():
    employees = [
        ScheduleEmployee(employee_id=1, schedule_id=1, name="  sam LEE "),
        ScheduleEmployee(employee_id=2, schedule_id=1, name="Somebody Else"),
        ScheduleEmployee(employee_id=3, schedule_id=1, name="Max Old"),
    ]
    svc, _, schedules = _service([], employees=employees)

    matches = svc.match_employees_to_staff(1)

    assert matches == [
        {"employee_name": "  sam LEE ", "staff_name": "Sam Lee", "staff_id": 1},
        {"employee_name": "Max Old", "staff_name": "Max Old", "staff_id": 4},
    ]
    assert schedules.employees[1].staff_id == 1
    assert schedules.employees[2].staff_id is None


def test_match_uses_first_staff_member_with_the_name():
    staff = InMemoryStaff([StaffMember(staff_id=5, name="Sam Lee"), StaffMember(staff_id=9, name="sam lee")])
    schedules = InMemorySchedules(employees=[ScheduleEmployee(employee_id=1, schedule_id=1, name="Sam Lee")])
    svc = AutoAssignmentService(InMemoryDeployments(), schedules, staff)

    assert svc.match_employees_to_staff(1)[0]["staff_id"] == 5
    assert schedules.employees[1].staff_id == 5
