from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..core import constants as c
from ..core.exceptions import ValidationError
from .model import ParsedSalesReport, SalesRecord, SalesValidation
from .parser import parse_sales_data
from .report import export_for_sales_records, generate_summary_report
from .repository import SalesRepository
from .validation import validate_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalesPreview:
    report: ParsedSalesReport
    validation: SalesValidation
    summary: dict


class SalesImportService:
    def __init__(self, sales: SalesRepository, *, tolerance: float = c.SALES_TOLERANCE):
        self._sales = sales
        self._tolerance = float(tolerance)

    def preview(self, raw: str) -> SalesPreview:
        report = parse_sales_data(raw)
        validation = validate_data(report, tolerance=self._tolerance)
        for warning in validation.warnings:
            logger.warning("Sales import: %s", warning)
        return SalesPreview(report=report, validation=validation, summary=generate_summary_report(report))

    def import_for_date(self, raw: str, *, work_date: date) -> int:
        preview = self.preview(raw)
        if not preview.validation.is_valid:
            raise ValidationError("; ".join(preview.validation.errors))

        records = export_for_sales_records(preview.report, work_date)
        written = self._sales.replace_for_date(work_date=work_date, records=records)
        logger.info("Stored %d hourly forecasts for %s", written, work_date)
        return written

    def records_for_date(self, work_date: date) -> list[SalesRecord]:
        return list(self._sales.list_for_date(work_date=work_date))
