from __future__ import annotations

from ..shifts.model import ParseError, Shift, TimeOfDay
from ..shifts.time_parser import parse_time

_MIDNIGHT = TimeOfDay(hours=0, minutes=0)


def _time_or_midnight(text: str) -> TimeOfDay:
    parsed = parse_time(text)
    return _MIDNIGHT if isinstance(parsed, ParseError) else parsed


def calculate_work_hours(start: str, end: str) -> float:
    """Decimal hours between two times; an earlier end means the next day.

    Unreadable times count as 00:00.
    """
    shift = Shift(start=_time_or_midnight(start), end=_time_or_midnight(end))
    hours = shift.end.to_decimal_hours() - shift.start.to_decimal_hours()
    if shift.crosses_midnight:
        hours += 24
    return hours
