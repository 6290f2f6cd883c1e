from __future__ import annotations

import logging

from ..core import constants as c
from ..core.enums import ShiftClassification
from .rules import FALLBACK_CLASSIFICATION, SHIFT_RULES
from .time_parser import time_to_minutes

logger = logging.getLogger(__name__)


def classify_minutes(start: int, end: int) -> ShiftClassification:
    """Apply the decision table to minutes since midnight. Never fails."""
    if end < c.NEXT_DAY_CUTOFF_MINUTES:
        end += c.MINUTES_PER_DAY

    for rule in SHIFT_RULES:
        if rule.matches(start, end):
            return rule.classification
    return FALLBACK_CLASSIFICATION


def classify_shift(start: str, end: str) -> ShiftClassification:
    start_min = time_to_minutes(start, fallback=None)
    end_min = time_to_minutes(end, fallback=None)
    if start_min is None or end_min is None:
        logger.warning("Unreadable shift time %r-%r, treating it as 00:00", start, end)
    return classify_minutes(start_min or 0, end_min or 0)


def expand_classification(classification: ShiftClassification) -> list[ShiftClassification]:
    """Deployment shift types a classified shift occupies."""
    if classification == ShiftClassification.BOTH_SHIFTS:
        return [ShiftClassification.DAY_SHIFT, ShiftClassification.NIGHT_SHIFT]
    return [classification]
