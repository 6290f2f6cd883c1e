from __future__ import annotations

from ..core import constants as c
from .model import ParsedSalesReport, SalesValidation
from .report import format_currency


def validate_data(report: ParsedSalesReport, *, tolerance: float = c.SALES_TOLERANCE) -> SalesValidation:
    """Integrity checks. Problems are reported, never raised."""
    result = SalesValidation()

    calculated = report.day_shift_forecast + report.night_shift_forecast
    if abs(calculated - report.total_manager_forecast) > tolerance:
        result.warnings.append(
            f"Shift totals ({format_currency(calculated)}) don't match day total "
            f"({format_currency(report.total_manager_forecast)})"
        )

    if not report.hourly_data:
        result.errors.append("No hourly data found")
        result.is_valid = False

    for row in report.hourly_data:
        if row.manager_forecast < 0:
            result.warnings.append(f"Negative forecast value at {row.time}")
        if row.manager_forecast > c.MAX_PLAUSIBLE_HOURLY_FORECAST:
            result.warnings.append(
                f"Unusually high forecast value at {row.time}: {format_currency(row.manager_forecast)}"
            )

    return result
