from __future__ import annotations

import math
from datetime import date

from ..core import constants as c
from .model import ParsedSalesReport, SalesLine, SalesRecord


def format_currency(amount: float) -> str:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or math.isnan(amount):
        return "£0.00"
    return f"£{amount:,.2f}"


def format_time_for_database(hour: int) -> str:
    return f"{hour:02d}:00"


def is_within_operating_hours(hour: int) -> bool:
    return c.STORE_OPEN_HOUR <= hour <= c.STORE_CLOSE_HOUR


def _breakdown(rows: list[SalesLine]) -> list[dict]:
    return [{"time": r.time, "forecast": format_currency(r.manager_forecast)} for r in rows]


def generate_summary_report(report: ParsedSalesReport) -> dict:
    hours = len(report.hourly_data)
    average = report.total_manager_forecast / hours if hours else 0.0
    return {
        "total_forecast": format_currency(report.total_manager_forecast),
        "day_shift_forecast": format_currency(report.day_shift_forecast),
        "night_shift_forecast": format_currency(report.night_shift_forecast),
        "hourly_breakdown": {
            "day_shift": _breakdown(report.day_shift),
            "night_shift": _breakdown(report.night_shift),
        },
        "statistics": {
            "total_hours": hours,
            "day_shift_hours": len(report.day_shift),
            "night_shift_hours": len(report.night_shift),
            "average_hourly_forecast": format_currency(average),
        },
    }


def export_for_sales_records(report: ParsedSalesReport, work_date: date) -> list[SalesRecord]:
    """Hourly rows inside store opening hours, ready for sales_records.

    sales_records holds one row per hour, so rows sharing an hour
    ("10:00 AM", "10:30 AM") are summed into it.
    """
    by_hour: dict[int, float] = {}
    for r in report.hourly_data:
        if r.hour is None or not is_within_operating_hours(r.hour):
            continue
        by_hour[r.hour] = by_hour.get(r.hour, 0.0) + r.manager_forecast

    return [
        SalesRecord(work_date=work_date, time=format_time_for_database(hour), forecast=forecast)
        for hour, forecast in by_hour.items()
    ]
