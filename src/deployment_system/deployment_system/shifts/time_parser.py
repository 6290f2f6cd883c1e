"""Time parsing: "3:00 PM", "15:00", "3pm" -> TimeOfDay / minutes since midnight."""
from __future__ import annotations

import re
from typing import Optional, Union

from .model import ParseError, TimeOfDay

# Order matters: first match wins.
TWELVE_HOUR_RE = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)
TWENTY_FOUR_HOUR_RE = re.compile(r"(\d{1,2}):(\d{2})")
HOUR_ONLY_RE = re.compile(r"(\d{1,2})\s*(AM|PM)", re.IGNORECASE)


def _from_12_hour(hour: int, minutes: int, meridiem: str, text: str) -> Union[TimeOfDay, ParseError]:
    if hour < 1 or hour > 12 or minutes > 59:
        return ParseError(text=text, reason="12-hour time out of range")
    if meridiem.upper() == "PM" and hour != 12:
        hour += 12
    elif meridiem.upper() == "AM" and hour == 12:
        hour = 0
    return TimeOfDay(hours=hour, minutes=minutes)


def parse_time(text: str) -> Union[TimeOfDay, ParseError]:
    """Parse a free-text time. Returns ParseError instead of raising."""
    if not isinstance(text, str) or not text.strip():
        return ParseError(text=str(text), reason="empty time")

    m = TWELVE_HOUR_RE.search(text)
    if m:
        return _from_12_hour(int(m.group(1)), int(m.group(2)), m.group(3), text)

    m = TWENTY_FOUR_HOUR_RE.search(text)
    if m:
        hour, minutes = int(m.group(1)), int(m.group(2))
        if hour > 23 or minutes > 59:
            return ParseError(text=text, reason="24-hour time out of range")
        return TimeOfDay(hours=hour, minutes=minutes)

    m = HOUR_ONLY_RE.search(text)
    if m:
        return _from_12_hour(int(m.group(1)), 0, m.group(2), text)

    return ParseError(text=text, reason="unrecognized time format")


def time_to_minutes(text: str, *, fallback: Optional[int] = 0) -> Optional[int]:
    """Minutes since midnight, or `fallback` when the text does not parse.

    The default fallback of 0 keeps the legacy behaviour of treating an
    unreadable time as midnight; pass fallback=None to see the failure.
    """
    parsed = parse_time(text)
    if isinstance(parsed, ParseError):
        return fallback
    return parsed.to_minutes()


def extract_hour(text: str) -> Optional[int]:
    """24-hour hour of the first time found in `text`, else None."""
    parsed = parse_time(text)
    if isinstance(parsed, ParseError):
        return None
    return parsed.hours
