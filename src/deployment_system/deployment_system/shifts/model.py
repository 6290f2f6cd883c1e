from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeOfDay:
    """Value object: a wall-clock time without a date."""

    hours: int
    minutes: int

    def to_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def to_decimal_hours(self) -> float:
        return self.hours + self.minutes / 60

    def format_24h(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"

    def format_12h(self) -> str:
        meridiem = "PM" if self.hours >= 12 else "AM"
        hour = self.hours % 12 or 12
        return f"{hour}:{self.minutes:02d} {meridiem}"


@dataclass(frozen=True)
class ParseError:
    """Returned (not raised) when a time string matches no known format."""

    text: str
    reason: str


@dataclass(frozen=True)
class Shift:
    start: TimeOfDay
    end: TimeOfDay

    @property
    def crosses_midnight(self) -> bool:
        return self.end.to_minutes() < self.start.to_minutes()
