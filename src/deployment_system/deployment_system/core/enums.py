from __future__ import annotations

from enum import Enum


class ShiftClassification(str, Enum):
    """Shift type as stored on deployments and shown to managers."""

    DAY_SHIFT = "Day Shift"
    NIGHT_SHIFT = "Night Shift"
    BOTH_SHIFTS = "Both Shifts"


class BreakType(str, Enum):
    MEAL_BREAK = "meal_break"
    REST_BREAK = "rest_break"
