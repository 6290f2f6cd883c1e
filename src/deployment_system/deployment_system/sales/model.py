from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class SalesLine:
    """One row of a pasted forecast table."""

    time: str
    last_year: float
    system_forecast: float
    manager_forecast: float
    hour: Optional[int] = None


@dataclass
class ParsedSalesReport:
    hourly_data: list[SalesLine] = field(default_factory=list)
    day_shift: list[SalesLine] = field(default_factory=list)
    night_shift: list[SalesLine] = field(default_factory=list)
    day_totals: Optional[SalesLine] = None
    total_manager_forecast: float = 0.0
    day_shift_forecast: float = 0.0
    night_shift_forecast: float = 0.0
    raw_lines: list[str] = field(default_factory=list)


@dataclass
class SalesValidation:
    is_valid: bool = True
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SalesRecord:
    """Hourly forecast as stored in sales_records."""

    work_date: date
    time: str  # HH:00
    forecast: float
