"""Excel report generator - infrastructure adapter for xlsx export."""

from datetime import datetime
from io import BytesIO
from typing import Any, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from shopfront.domain.reporting import (
    OverviewReport,
    ProductSales,
    ProductsReport,
    Report,
    ReportType,
    SalesReport,
    UsersReport,
)

CURRENCY_FORMAT = "$#,##0.00"
PERCENT_FORMAT = "0.0%"


class ExcelStyles:
    """Centralized style definitions for Excel formatting."""

    PRIMARY_BLUE = "1E3A5F"
    WARNING_AMBER = "D97706"
    HEADER_BG = "1E3A5F"
    HEADER_FG = "FFFFFF"
    SUBHEADER_BG = "E5E7EB"
    ALT_ROW_BG = "F9FAFB"
    BORDER_COLOR = "D1D5DB"

    TITLE_FONT = Font(name="Calibri", size=20, bold=True, color=PRIMARY_BLUE)
    SUBTITLE_FONT = Font(name="Calibri", size=11, color="6B7280")
    HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=HEADER_FG)
    SUBHEADER_FONT = Font(name="Calibri", size=11, bold=True, color=PRIMARY_BLUE)
    METRIC_LABEL_FONT = Font(name="Calibri", size=10, color="6B7280")
    METRIC_VALUE_FONT = Font(name="Calibri", size=14, bold=True, color=PRIMARY_BLUE)
    BODY_FONT = Font(name="Calibri", size=10)
    WARNING_FONT = Font(name="Calibri", size=10, bold=True, color=WARNING_AMBER)

    HEADER_FILL = PatternFill(
        start_color=HEADER_BG,
        end_color=HEADER_BG,
        fill_type="solid",
    )
    SUBHEADER_FILL = PatternFill(
        start_color=SUBHEADER_BG,
        end_color=SUBHEADER_BG,
        fill_type="solid",
    )
    ALT_ROW_FILL = PatternFill(
        start_color=ALT_ROW_BG,
        end_color=ALT_ROW_BG,
        fill_type="solid",
    )

    THIN_BORDER = Border(
        left=Side(style="thin", color=BORDER_COLOR),
        right=Side(style="thin", color=BORDER_COLOR),
        top=Side(style="thin", color=BORDER_COLOR),
        bottom=Side(style="thin", color=BORDER_COLOR),
    )

    CENTER = Alignment(horizontal="center", vertical="center")
    LEFT = Alignment(horizontal="left", vertical="center")
    RIGHT = Alignment(horizontal="right", vertical="center")


class ExcelReportGenerator:
    """Renders an admin report as a two-sheet workbook.

    1. Summary - headline metrics
    2. Details - the report's table (categories, days, products or customers)
    """

    def __init__(self):
        self._styles = ExcelStyles()

    def generate(
        self,
        report_type: ReportType,
        report: Report,
        days: Optional[int],
        generated_at: datetime,
    ) -> bytes:
        wb = Workbook()

        default_sheet = wb.active
        if default_sheet is not None:
            wb.remove(default_sheet)

        summary = wb.create_sheet(title="Summary")
        row = self._add_header(summary, report_type, days, generated_at)
        self._add_metrics(summary, row, self._metrics(report))
        summary.column_dimensions["A"].width = 28
        summary.column_dimensions["B"].width = 20

        headers, rows, formats = self._details(report)
        details = wb.create_sheet(title="Details")
        self._add_table(details, headers, rows, formats)

        output = BytesIO()
        wb.save(output)
        output.seek(0)
        return output.getvalue()

    @staticmethod
    def filename(report_type: ReportType, generated_at: datetime) -> str:
        return f"{report_type.value}-report-{generated_at.date().isoformat()}.xlsx"

    def _add_header(
        self,
        ws: Worksheet,
        report_type: ReportType,
        days: Optional[int],
        generated_at: datetime,
    ) -> int:
        ws.merge_cells("A1:D1")
        title = ws.cell(row=1, column=1, value=f"{report_type.value.title()} Report")
        title.font = self._styles.TITLE_FONT

        period = f"Last {days} days" if days is not None else "All time"
        ws.cell(row=2, column=1, value=f"Period: {period}").font = (
            self._styles.SUBTITLE_FONT
        )
        generated = generated_at.strftime("%d %B %Y, %H:%M %Z").strip()
        ws.cell(row=3, column=1, value=f"Generated: {generated}").font = (
            self._styles.SUBTITLE_FONT
        )
        return 5

    def _add_metrics(
        self,
        ws: Worksheet,
        row: int,
        metrics: list[tuple[str, Any, Optional[str]]],
    ) -> int:
        for label, value, fmt in metrics:
            label_cell = ws.cell(row=row, column=1, value=label)
            label_cell.font = self._styles.METRIC_LABEL_FONT
            value_cell = ws.cell(row=row, column=2, value=value)
            value_cell.font = self._styles.METRIC_VALUE_FONT
            value_cell.alignment = self._styles.RIGHT
            if fmt:
                value_cell.number_format = fmt
            row += 1
        return row

    def _add_table(
        self,
        ws: Worksheet,
        headers: list[str],
        rows: list[list[Any]],
        formats: dict[int, str],
    ) -> None:
        for col, header in enumerate(headers, start=1):
            cell = ws.cell(row=1, column=col, value=header)
            cell.font = self._styles.HEADER_FONT
            cell.fill = self._styles.HEADER_FILL
            cell.alignment = self._styles.CENTER
            ws.column_dimensions[cell.column_letter].width = max(14, len(header) + 4)

        for row_idx, values in enumerate(rows, start=2):
            for col, value in enumerate(values, start=1):
                cell = ws.cell(row=row_idx, column=col, value=value)
                cell.font = self._styles.BODY_FONT
                cell.border = self._styles.THIN_BORDER
                if col in formats:
                    cell.number_format = formats[col]
                    cell.alignment = self._styles.RIGHT
                if row_idx % 2 == 0:
                    cell.fill = self._styles.ALT_ROW_FILL

        ws.freeze_panes = "A2"

    def _metrics(self, report: Report) -> list[tuple[str, Any, Optional[str]]]:
        if isinstance(report, OverviewReport):
            return [
                ("Total Revenue", float(report.total_revenue), CURRENCY_FORMAT),
                ("Total Orders", report.total_orders, None),
                (
                    "Average Order Value",
                    float(report.average_order_value),
                    CURRENCY_FORMAT,
                ),
                (
                    "Completion Rate",
                    float(report.completion_rate) / 100,
                    PERCENT_FORMAT,
                ),
            ]
        if isinstance(report, SalesReport):
            return [
                ("Total Revenue", float(report.total_revenue), CURRENCY_FORMAT),
                ("Total Orders", report.total_orders, None),
                ("Days With Sales", len(report.daily_sales), None),
            ]
        if isinstance(report, ProductsReport):
            return [
                ("Total Products", report.total_products, None),
                ("Low Stock Products", report.low_stock_products, None),
            ]
        return [
            ("Unique Customers", report.unique_customers, None),
            ("Repeat Customers", report.repeat_customers, None),
        ]

    def _details(
        self,
        report: Report,
    ) -> tuple[list[str], list[list[Any]], dict[int, str]]:
        if isinstance(report, OverviewReport):
            return (
                ["Category", "Revenue"],
                [[c.category, float(c.revenue)] for c in report.top_categories],
                {2: CURRENCY_FORMAT},
            )
        if isinstance(report, SalesReport):
            return (
                ["Date", "Orders", "Revenue", "Average Order"],
                [
                    [
                        d.day,
                        d.orders,
                        float(d.revenue),
                        float(d.revenue) / d.orders if d.orders else 0.0,
                    ]
                    for d in report.daily_sales
                ],
                {3: CURRENCY_FORMAT, 4: CURRENCY_FORMAT},
            )
        if isinstance(report, ProductsReport):
            return (
                ["Product", "Category", "Units Sold", "Revenue", "Stock", "Status"],
                [
                    [
                        p.name,
                        p.category or "",
                        p.sales,
                        float(p.revenue),
                        p.count_in_stock,
                        _stock_status(p),
                    ]
                    for p in report.product_sales
                ],
                {4: CURRENCY_FORMAT},
            )
        if isinstance(report, UsersReport):
            return (
                ["Customer ID", "Orders", "Total Spent", "Average Order"],
                [
                    [
                        str(c.user_id),
                        c.orders,
                        float(c.total_spent),
                        float(c.average_order_value),
                    ]
                    for c in report.customers
                ],
                {3: CURRENCY_FORMAT, 4: CURRENCY_FORMAT},
            )
        msg = f"Unsupported report: {type(report).__name__}"
        raise TypeError(msg)


def _stock_status(product: ProductSales) -> str:
    if product.count_in_stock is None:
        return "Unknown"
    return "Low Stock" if product.is_low_stock else "In Stock"
