"""Export adapters."""

from shopfront.infrastructure.export.excel_report_generator import (
    ExcelReportGenerator,
)

__all__ = ["ExcelReportGenerator"]
