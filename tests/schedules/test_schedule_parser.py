from datetime import date

from src.deployment_system.deployment_system.schedules.parser import (
    format_compact_time,
    parse_shift_line,
    shifts_for_week,
)

LINE = "9:00a - 5:00p  --  10:00a - 7:00p  --  --  5:00p - 4:00a  --"


def test_format_compact_time():
    assert format_compact_time("9", "00", "a") == "9:00 AM"
    assert format_compact_time("05", "30", "P") == "5:30 PM"


def test_parse_shift_line_skips_days_off():
    shifts = parse_shift_line(LINE)

    assert [(s.day, s.start, s.end) for s in shifts] == [
        ("monday", "9:00 AM", "5:00 PM"),
        ("wednesday", "10:00 AM", "7:00 PM"),
        ("saturday", "5:00 PM", "4:00 AM"),
    ]


def test_only_first_seven_cells_are_read():
    line = "  ".join(["--"] * 7 + ["9:00a - 5:00p"])
    assert parse_shift_line(line) == []


def test_empty_line():
    assert parse_shift_line("") == []
    assert parse_shift_line(None) == []


def test_shifts_for_week_attaches_dates():
    shifts = shifts_for_week(LINE, date(2025, 1, 6))
    assert [s.shift_date for s in shifts] == [date(2025, 1, 6), date(2025, 1, 8), date(2025, 1, 11)]
