"""Week-schedule lines as printed by the rota PDF.

A line holds up to seven cells, Monday first; each cell is either "--" (day
off) or a compact range such as "9:00a - 5:00p".
"""
from __future__ import annotations

import re
from datetime import date, timedelta

from .model import ParsedScheduleShift

WEEK_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

CELL_RE = re.compile(r"--|\d{1,2}:\d{2}[ap]\s*-\s*\d{1,2}:\d{2}[ap]", re.IGNORECASE)
RANGE_RE = re.compile(r"(\d{1,2}):(\d{2})([ap])\s*-\s*(\d{1,2}):(\d{2})([ap])", re.IGNORECASE)


def format_compact_time(hours: str, minutes: str, period: str) -> str:
    """("9", "00", "a") -> "9:00 AM"."""
    meridiem = "AM" if period.lower() == "a" else "PM"
    return f"{int(hours)}:{minutes} {meridiem}"


def parse_shift_line(line: str) -> list[ParsedScheduleShift]:
    shifts: list[ParsedScheduleShift] = []
    cells = CELL_RE.findall(line or "")[: len(WEEK_DAYS)]
    for day, cell in zip(WEEK_DAYS, cells):
        m = RANGE_RE.match(cell)
        if not m:
            continue
        shifts.append(
            ParsedScheduleShift(
                day=day,
                start=format_compact_time(m.group(1), m.group(2), m.group(3)),
                end=format_compact_time(m.group(4), m.group(5), m.group(6)),
            )
        )
    return shifts


def shifts_for_week(line: str, week_start: date) -> list[ParsedScheduleShift]:
    """Same as parse_shift_line, with dates counted from the Monday `week_start`."""
    return [
        ParsedScheduleShift(
            day=s.day,
            start=s.start,
            end=s.end,
            shift_date=week_start + timedelta(days=WEEK_DAYS.index(s.day)),
        )
        for s in parse_shift_line(line)
    ]
