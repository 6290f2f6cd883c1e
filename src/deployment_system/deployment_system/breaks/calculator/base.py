from __future__ import annotations

from abc import ABC, abstractmethod


class BreakCalculator(ABC):
    """Calculator interface (Strategy Pattern for break entitlement)."""

    @abstractmethod
    def break_minutes(self, *, is_under_18: bool, work_hours: float) -> int:
        raise NotImplementedError
