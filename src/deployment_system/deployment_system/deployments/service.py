from __future__ import annotations

import logging
from typing import Optional

from ..breaks.calculator.base import BreakCalculator
from ..breaks.calculator.statutory_calculator import StatutoryBreakCalculator
from ..breaks.work_hours import calculate_work_hours
from ..core.constants import DEFAULT_MAX_DEPLOYMENTS_PER_SHIFT
from ..core.enums import ShiftClassification
from ..core.exceptions import DomainError
from ..schedules.model import ScheduleShift
from ..schedules.repository import ScheduleRepository
from ..shifts.classifier import classify_shift, expand_classification
from ..shifts.model import ParseError
from ..shifts.time_parser import parse_time
from ..staff.repository import StaffRepository
from .model import AssignmentResults
from .repository import DeploymentRepository

logger = logging.getLogger(__name__)


def _to_24h(value: str) -> str:
    parsed = parse_time(value)
    if isinstance(parsed, ParseError):
        return value
    return parsed.format_24h()


class AutoAssignmentService:
    """Turns imported schedule shifts into day/night deployments."""

    def __init__(
        self,
        deployments: DeploymentRepository,
        schedules: ScheduleRepository,
        staff: StaffRepository,
        *,
        calculator: Optional[BreakCalculator] = None,
        max_per_shift: int = DEFAULT_MAX_DEPLOYMENTS_PER_SHIFT,
    ):
        self._deployments = deployments
        self._schedules = schedules
        self._staff = staff
        self._calculator = calculator or StatutoryBreakCalculator()
        self._max_per_shift = int(max_per_shift)

    def _create_deployment(self, shift: ScheduleShift, shift_type: ShiftClassification) -> Optional[int]:
        """Returns the new deployment_id, or None when the slot is taken or full."""
        if self._deployments.exists(staff_id=shift.staff_id, work_date=shift.shift_date, shift_type=shift_type):
            return None

        if self._deployments.count_for(work_date=shift.shift_date, shift_type=shift_type) >= self._max_per_shift:
            logger.warning("Maximum deployments reached for %s on %s", shift_type.value, shift.shift_date)
            return None

        member = self._staff.get_by_id(shift.staff_id)
        if not member:
            raise DomainError(f"Staff member {shift.staff_id} does not exist")

        work_hours = calculate_work_hours(shift.start_time, shift.end_time)
        return self._deployments.create(
            staff_id=member.staff_id,
            work_date=shift.shift_date,
            shift_type=shift_type,
            start_time=_to_24h(shift.start_time),
            end_time=_to_24h(shift.end_time),
            break_minutes=self._calculator.break_minutes(is_under_18=member.is_under_18, work_hours=work_hours),
        )

    def auto_assign(self, schedule_id: int) -> AssignmentResults:
        results = AssignmentResults()

        for shift in self._schedules.list_unassigned_shifts(schedule_id=int(schedule_id)):
            if not shift.staff_id:
                results.skipped.append({"employee_name": shift.employee_name, "reason": "No staff member matched"})
                continue

            try:
                classification = classify_shift(shift.start_time, shift.end_time)
                shift_types = expand_classification(classification)
                created = [self._create_deployment(shift, t) for t in shift_types]

                if all(d is not None for d in created):
                    self._schedules.mark_assigned(shift_id=shift.shift_id, deployment_id=created[0])
                    results.success.append(
                        {
                            "employee_name": shift.employee_name,
                            "date": shift.shift_date.isoformat(),
                            "shifts": [t.value for t in shift_types],
                        }
                    )
                else:
                    reason = (
                        "Maximum deployments reached for one or both shifts"
                        if classification == ShiftClassification.BOTH_SHIFTS
                        else f"Maximum deployments reached for {classification.value}"
                    )
                    results.skipped.append(
                        {"employee_name": shift.employee_name, "date": shift.shift_date.isoformat(), "reason": reason}
                    )
            except DomainError as e:
                logger.error("Error assigning shift %s: %s", shift.shift_id, e)
                results.failed.append({"employee_name": shift.employee_name, "error": str(e)})

        logger.info(
            "Auto-assignment for schedule %s: %d assigned, %d skipped, %d failed",
            schedule_id,
            len(results.success),
            len(results.skipped),
            len(results.failed),
        )
        return results

    def match_employees_to_staff(self, schedule_id: int) -> list[dict]:
        """Link schedule employees to staff records by (case-insensitive) name; the first staff match wins."""
        by_name: dict = {}
        for m in self._staff.list_all():
            by_name.setdefault(m.name.strip().lower(), m)
        matches: list[dict] = []

        for employee in self._schedules.list_unmatched_employees(schedule_id=int(schedule_id)):
            member = by_name.get(employee.name.strip().lower())
            if not member:
                continue
            if self._schedules.link_employee_to_staff(employee_id=employee.employee_id, staff_id=member.staff_id):
                matches.append(
                    {"employee_name": employee.name, "staff_name": member.name, "staff_id": member.staff_id}
                )
        return matches
