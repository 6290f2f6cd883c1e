from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core import constants as c
from ..core.enums import ShiftClassification


@dataclass(frozen=True)
class ClassificationRule:
    """One row of the shift decision table.

    `matches` receives (start, end) in minutes, with `end` already moved to
    the next day when it falls before the cutoff.
    """

    name: str
    classification: ShiftClassification
    matches: Callable[[int, int], bool]


SHIFT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        name="day",
        classification=ShiftClassification.DAY_SHIFT,
        matches=lambda start, end: start > c.NEXT_DAY_CUTOFF_MINUTES and end < c.DAY_SHIFT_END_MINUTES,
    ),
    ClassificationRule(
        name="late_close",
        classification=ShiftClassification.NIGHT_SHIFT,
        matches=lambda start, end: start > c.NIGHT_START_AFTER_MINUTES and end > c.NIGHT_END_AFTER_MINUTES,
    ),
    ClassificationRule(
        name="both",
        classification=ShiftClassification.BOTH_SHIFTS,
        matches=lambda start, end: (
            c.NEXT_DAY_CUTOFF_MINUTES < start < c.BOTH_START_BEFORE_MINUTES
            and c.DAY_SHIFT_END_MINUTES <= end <= c.BOTH_END_MAX_MINUTES
        ),
    ),
    ClassificationRule(
        name="afternoon_start",
        classification=ShiftClassification.NIGHT_SHIFT,
        matches=lambda start, end: start > c.NIGHT_START_AFTER_MINUTES,
    ),
)

# Early-morning and odd shifts land here.
FALLBACK_CLASSIFICATION = ShiftClassification.NIGHT_SHIFT
