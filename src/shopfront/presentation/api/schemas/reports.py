"""Report response schemas.

Monetary values are Decimals and serialize as JSON strings.
"""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategoryRevenueResponse(BaseModel):
    category: str
    revenue: Decimal

    model_config = ConfigDict(from_attributes=True)


class OverviewReportResponse(BaseModel):
    total_revenue: Decimal
    total_orders: int
    average_order_value: Decimal
    completion_rate: Decimal = Field(description="Delivered orders in percent")
    top_categories: list[CategoryRevenueResponse]

    model_config = ConfigDict(from_attributes=True)


class DailySalesResponse(BaseModel):
    day: str = Field(description="Calendar day (YYYY-MM-DD)")
    orders: int
    revenue: Decimal

    model_config = ConfigDict(from_attributes=True)


class SalesReportResponse(BaseModel):
    daily_sales: list[DailySalesResponse]
    total_revenue: Decimal
    total_orders: int

    model_config = ConfigDict(from_attributes=True)


class ProductSalesResponse(BaseModel):
    product_id: Optional[UUID]
    name: str
    category: Optional[str]
    count_in_stock: Optional[int]
    sales: int
    revenue: Decimal
    is_low_stock: bool

    model_config = ConfigDict(from_attributes=True)


class ProductsReportResponse(BaseModel):
    product_sales: list[ProductSalesResponse]
    total_products: int
    low_stock_products: int

    model_config = ConfigDict(from_attributes=True)


class CustomerSummaryResponse(BaseModel):
    user_id: UUID
    orders: int
    total_spent: Decimal
    average_order_value: Decimal

    model_config = ConfigDict(from_attributes=True)


class UsersReportResponse(BaseModel):
    unique_customers: int
    repeat_customers: int
    customers: list[CustomerSummaryResponse]

    model_config = ConfigDict(from_attributes=True)


ReportData = Union[
    OverviewReportResponse,
    SalesReportResponse,
    ProductsReportResponse,
    UsersReportResponse,
]


class ReportResponse(BaseModel):
    """Envelope with the report type, window and data."""

    type: str
    days: Optional[int]
    data: ReportData
