from __future__ import annotations

import math

from ...core import constants as c
from ...core.enums import BreakType
from .base import BreakCalculator


def _normalize_hours(work_hours: float) -> float:
    # Negative or NaN durations count as no work.
    if work_hours is None or math.isnan(work_hours) or work_hours < 0:
        return 0.0
    return float(work_hours)


class StatutoryBreakCalculator(BreakCalculator):
    """Unpaid break rule: under-18s get 30 min from 4.5h, adults 15 min from 4.5h and 30 min from 6h."""

    def break_minutes(self, *, is_under_18: bool, work_hours: float) -> int:
        hours = _normalize_hours(work_hours)
        if is_under_18:
            return c.LONG_BREAK_MINUTES if hours >= c.UNDER_18_BREAK_THRESHOLD_HOURS else 0

        if hours >= c.ADULT_LONG_BREAK_THRESHOLD_HOURS:
            return c.LONG_BREAK_MINUTES
        if hours >= c.ADULT_SHORT_BREAK_THRESHOLD_HOURS:
            return c.SHORT_BREAK_MINUTES
        return 0


_DEFAULT_CALCULATOR = StatutoryBreakCalculator()


def calculate_break_time(is_under_18: bool, work_hours: float) -> int:
    return _DEFAULT_CALCULATOR.break_minutes(is_under_18=is_under_18, work_hours=work_hours)


def break_type_for(is_under_18: bool, work_hours: float) -> BreakType:
    """Adults entitled to the long break take it as a meal; everything else is a rest break."""
    if not is_under_18 and _normalize_hours(work_hours) >= c.ADULT_LONG_BREAK_THRESHOLD_HOURS:
        return BreakType.MEAL_BREAK
    return BreakType.REST_BREAK
