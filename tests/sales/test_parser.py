from __future__ import annotations

import pytest

from src.deployment_system.deployment_system.core.exceptions import InvalidInputError
from src.deployment_system.deployment_system.sales.parser import (
    is_day_shift_hour,
    is_night_shift_hour,
    parse_currency,
    parse_sales_data,
    parse_table_row,
    should_ignore_row,
)
from src.deployment_system.deployment_system.sales.validation import validate_data

TAB_TABLE = "\n".join(
    [
        "Time\tLast Year\tSystem Forecast\tManager Forecast",
        "Breakfast\t£150.00\t£160.00\t£170.00",
        "10:00 AM\t£200.00\t£210.00\t£220.00",
        "Lunch\t£900.00\t£950.00\t£1,000.00",
        "3:00 PM\t£300.00\t£310.00\t£320.00",
        "5:00 PM\t£400.00\t£410.00\t£420.00",
        "Day Totals\t£900.00\t£930.00\t£960.00",
    ]
)


def test_parse_table_row_separators():
    assert parse_table_row("a\tb\t\tc") == ["a", "b", "c"]
    assert parse_table_row("a | b | c") == ["a", "b", "c"]
    assert parse_table_row("10:00 AM   £1.00  £2.00") == ["10:00 AM", "£1.00", "£2.00"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("£4,300.00", 4300.0),
        ("$12.5", 12.5),
        ("€ 7", 7.0),
        ("-£5.00", -5.0),
        ("12abc", 12.0),
        ("not a number", 0.0),
        ("", 0.0),
        (None, 0.0),
    ],
)
def test_parse_currency(value, expected):
    assert parse_currency(value) == expected


def test_should_ignore_meal_period_rows():
    assert should_ignore_row("Breakfast")
    assert should_ignore_row("LUNCH total")
    assert should_ignore_row("")
    assert not should_ignore_row("10:00 AM")
    assert not should_ignore_row("Day Totals")


def test_shift_hour_buckets():
    assert is_day_shift_hour(6) and is_day_shift_hour(15)
    assert not is_day_shift_hour(16) and not is_day_shift_hour(5)
    assert is_night_shift_hour(16) and is_night_shift_hour(23)
    assert not is_night_shift_hour(15)


def test_parse_tab_separated_table():
    report = parse_sales_data(TAB_TABLE)

    assert [r.time for r in report.hourly_data] == ["10:00 AM", "3:00 PM", "5:00 PM"]
    assert [r.hour for r in report.day_shift] == [10, 15]
    assert [r.hour for r in report.night_shift] == [17]
    assert report.day_shift_forecast == pytest.approx(540.0)
    assert report.night_shift_forecast == pytest.approx(420.0)
    assert report.day_totals.system_forecast == pytest.approx(930.0)
    assert report.total_manager_forecast == pytest.approx(960.0)
    assert len(report.raw_lines) == 7


def test_manager_forecast_on_following_line():
    raw = "\n".join(
        [
            "Lunch  £900.00  £950.00",
            "£1,000.00",
            "11:00 AM  £100.00  £110.00",
            "£120.00",
            "Day Totals  £100.00  £110.00",
            "£120.00",
        ]
    )
    report = parse_sales_data(raw)

    assert len(report.hourly_data) == 1
    assert report.hourly_data[0].manager_forecast == pytest.approx(120.0)
    assert report.total_manager_forecast == pytest.approx(120.0)


def test_pipe_separated_rows_and_hours_outside_both_shifts():
    raw = "\n".join(
        [
            "5:00 AM | £10.00 | £11.00 | £12.00",
            "11:00 PM | £20.00 | £21.00 | £22.00",
        ]
    )
    report = parse_sales_data(raw)

    assert [r.hour for r in report.hourly_data] == [5, 23]
    assert report.day_shift == []
    assert [r.hour for r in report.night_shift] == [23]


def test_rows_with_fewer_than_three_columns_are_ignored():
    report = parse_sales_data("Forecast for Monday\n10:00 AM\t£1.00")
    assert report.hourly_data == []


def test_all_zero_table():
    raw = "10:00 AM\t£0.00\t£0.00\t£0.00\nDay Totals\t£0.00\t£0.00\t£0.00"
    report = parse_sales_data(raw)

    assert report.total_manager_forecast == 0
    assert len(report.hourly_data) == 1

    validation = validate_data(report)
    assert validation.is_valid
    assert validation.errors == []


@pytest.mark.parametrize("raw", ["", "   \n  ", None, 42])
def test_invalid_input_raises(raw):
    with pytest.raises(InvalidInputError):
        parse_sales_data(raw)
