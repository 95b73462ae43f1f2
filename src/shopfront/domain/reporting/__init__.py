"""Reporting domain - derived statistics over orders and products."""

from shopfront.domain.reporting.aggregator import (
    TOP_CATEGORY_LIMIT,
    filter_orders_by_window,
    overview_report,
    products_report,
    sales_report,
    top_categories,
    users_report,
)
from shopfront.domain.reporting.reports import (
    CategoryRevenue,
    CustomerSummary,
    DailySales,
    OverviewReport,
    ProductSales,
    ProductsReport,
    Report,
    ReportType,
    SalesReport,
    UsersReport,
)

__all__ = [
    "CategoryRevenue",
    "CustomerSummary",
    "DailySales",
    "OverviewReport",
    "ProductSales",
    "ProductsReport",
    "Report",
    "ReportType",
    "SalesReport",
    "TOP_CATEGORY_LIMIT",
    "UsersReport",
    "filter_orders_by_window",
    "overview_report",
    "products_report",
    "sales_report",
    "top_categories",
    "users_report",
]
