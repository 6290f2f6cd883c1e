from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional

from ..core.enums import ShiftClassification
from ..deployments.model import Deployment
from ..deployments.repository import DeploymentRepository
from ..shifts.model import ParseError
from ..shifts.time_parser import parse_time
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from .calculator.base import BreakCalculator
from .calculator.statutory_calculator import StatutoryBreakCalculator, break_type_for
from .model import ScheduledBreak
from .repository import BreakRepository
from .work_hours import calculate_work_hours

logger = logging.getLogger(__name__)


class BreakSchedulingService:
    def __init__(
        self,
        breaks: BreakRepository,
        deployments: DeploymentRepository,
        staff: StaffRepository,
        *,
        calculator: Optional[BreakCalculator] = None,
    ):
        self._breaks = breaks
        self._deployments = deployments
        self._staff = staff
        self._calculator = calculator or StatutoryBreakCalculator()

    def plan_break(self, deployment: Deployment, member: StaffMember) -> Optional[ScheduledBreak]:
        """Break owed for one deployment, placed halfway through the shift (on the hour)."""
        work_hours = calculate_work_hours(deployment.start_time, deployment.end_time)
        minutes = self._calculator.break_minutes(is_under_18=member.is_under_18, work_hours=work_hours)
        if minutes <= 0:
            return None

        start = parse_time(deployment.start_time)
        start_hour = 0 if isinstance(start, ParseError) else start.hours
        break_hour = (start_hour + math.floor(work_hours / 2)) % 24

        return ScheduledBreak(
            deployment_id=deployment.deployment_id,
            staff_id=deployment.staff_id,
            work_date=deployment.work_date,
            shift_type=deployment.shift_type,
            break_type=break_type_for(member.is_under_18, work_hours),
            duration_minutes=minutes,
            scheduled_start=f"{break_hour:02d}:00",
            note="Under-18 compliance break" if member.is_under_18 else "Standard break",
        )

    def auto_schedule(self, *, work_date: date, shift_type: ShiftClassification) -> list[ScheduledBreak]:
        """Plan and store breaks for everyone on the shift who has none yet."""
        already = {b.staff_id for b in self._breaks.list_for(work_date=work_date, shift_type=shift_type)}

        planned: list[ScheduledBreak] = []
        for deployment in self._deployments.list_for(work_date=work_date, shift_type=shift_type):
            if deployment.staff_id in already:
                continue
            member = self._staff.get_by_id(deployment.staff_id)
            if not member:
                logger.warning("Deployment %s points at missing staff %s", deployment.deployment_id, deployment.staff_id)
                continue
            planned_break = self.plan_break(deployment, member)
            if planned_break:
                planned.append(planned_break)
                already.add(deployment.staff_id)

        self._breaks.create_many(planned)
        logger.info("Scheduled %d breaks for %s %s", len(planned), work_date, shift_type.value)
        return planned
