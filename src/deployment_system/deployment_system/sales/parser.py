"""Parser for daily sales forecasts pasted from the back-office spreadsheet.

Expected shape (tab, pipe or 2+ space separated)::

    Time        Last Year   System Forecast   Manager Forecast
    10:00 AM    £210.00     £230.00           £240.00
    Lunch       £900.00     £950.00           £1,000.00
    Day Totals  £4,100.00   £4,250.00         £4,300.00

The manager forecast may also sit alone on the line below its row.
"""
from __future__ import annotations

import logging
import re

from ..core import constants as c
from ..core.exceptions import InvalidInputError
from ..shifts.time_parser import extract_hour
from .model import ParsedSalesReport, SalesLine

logger = logging.getLogger(__name__)

_CURRENCY_STRIP_RE = re.compile(r"[£$€,\s]")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_table_row(row: str) -> list[str]:
    if "\t" in row:
        columns = row.split("\t")
    elif "|" in row:
        columns = row.split("|")
    else:
        columns = _MULTI_SPACE_RE.split(row)
    return [col.strip() for col in columns if col.strip()]


def parse_currency(value: str) -> float:
    """Leading number after dropping currency symbols, commas and spaces; else 0.

    "£4,300.00" -> 4300.0
    """
    if not value or not isinstance(value, str):
        return 0.0
    m = _LEADING_NUMBER_RE.match(_CURRENCY_STRIP_RE.sub("", value))
    return float(m.group(0)) if m else 0.0


def should_ignore_row(label: str) -> bool:
    """Meal-period subtotal rows (Breakfast, Lunch, ...) are not hourly data."""
    if not label:
        return True
    lowered = label.lower()
    return any(period.lower() in lowered for period in c.MEAL_PERIODS)


def is_day_shift_hour(hour: int) -> bool:
    return c.DAY_SHIFT_START_HOUR <= hour < c.DAY_SHIFT_END_HOUR


def is_night_shift_hour(hour: int) -> bool:
    return c.NIGHT_SHIFT_START_HOUR <= hour <= c.NIGHT_SHIFT_END_HOUR


def parse_sales_data(raw: str) -> ParsedSalesReport:
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInputError("Invalid input data")

    lines = raw.strip().split("\n")
    report = ParsedSalesReport(raw_lines=lines)

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        i += 1
        if not line:
            continue

        columns = parse_table_row(line)
        if len(columns) < 3:
            continue

        label = columns[0]
        manager_forecast = 0.0
        if len(columns) >= 4:
            manager_forecast = parse_currency(columns[3])
        elif i < len(lines):
            next_columns = parse_table_row(lines[i].strip())
            if len(next_columns) == 1 and "£" in next_columns[0]:
                manager_forecast = parse_currency(next_columns[0])
                i += 1

        if should_ignore_row(label):
            logger.debug("Skipping meal period row: %s", label)
            continue

        row = SalesLine(
            time=label,
            last_year=parse_currency(columns[1]),
            system_forecast=parse_currency(columns[2]),
            manager_forecast=manager_forecast,
            hour=extract_hour(label),
        )

        if c.DAY_TOTALS_LABEL in label.lower():
            report.day_totals = row
            report.total_manager_forecast = manager_forecast
            continue

        if row.hour is None:
            continue

        report.hourly_data.append(row)
        if is_day_shift_hour(row.hour):
            report.day_shift.append(row)
            report.day_shift_forecast += manager_forecast
        elif is_night_shift_hour(row.hour):
            report.night_shift.append(row)
            report.night_shift_forecast += manager_forecast

    logger.debug(
        "Parsed %d hourly rows (total=%.2f day=%.2f night=%.2f)",
        len(report.hourly_data),
        report.total_manager_forecast,
        report.day_shift_forecast,
        report.night_shift_forecast,
    )
    return report
