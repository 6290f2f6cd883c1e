from __future__ import annotations

import pytest

from src.deployment_system.deployment_system.shifts.model import ParseError, TimeOfDay
from src.deployment_system.deployment_system.shifts.time_parser import extract_hour, parse_time, time_to_minutes


@pytest.mark.parametrize(
    "text,expected",
    [
        ("3:00 PM", TimeOfDay(15, 0)),
        ("3:05pm", TimeOfDay(15, 5)),
        ("09:30 am", TimeOfDay(9, 30)),
        ("12:00 AM", TimeOfDay(0, 0)),
        ("12:45 PM", TimeOfDay(12, 45)),
        ("15:45", TimeOfDay(15, 45)),
        ("00:10", TimeOfDay(0, 10)),
        ("3pm", TimeOfDay(15, 0)),
        ("12 am", TimeOfDay(0, 0)),
        ("Start 7:15 AM", TimeOfDay(7, 15)),
    ],
)
def test_parse_time_accepts_known_formats(text, expected):
    assert parse_time(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "noon", "25:00", "10:75", "13:00 PM", "0:30 AM", None])
def test_parse_time_returns_parse_error(text):
    assert isinstance(parse_time(text), ParseError)


def test_twelve_hour_pattern_wins_over_twenty_four_hour():
    # "1:00 PM" also matches HH:MM; the 12-hour reading must be used.
    assert parse_time("1:00 PM") == TimeOfDay(13, 0)


def test_canonical_formats_round_trip_for_every_time_of_day():
    for hours in range(24):
        for minutes in range(60):
            t = TimeOfDay(hours, minutes)
            assert parse_time(t.format_12h()) == t
            assert parse_time(t.format_24h()) == t


def test_time_to_minutes_keeps_legacy_zero_fallback():
    assert time_to_minutes("5:00 PM") == 1020
    assert time_to_minutes("garbage") == 0
    assert time_to_minutes("garbage", fallback=None) is None


def test_extract_hour():
    assert extract_hour("10:00 AM") == 10
    assert extract_hour("11:00 PM") == 23
    assert extract_hour("Day Totals") is None
