"""Report records produced by the reporting aggregator."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from uuid import UUID

from shopfront.domain.commerce import LOW_STOCK_THRESHOLD


class ReportType(str, Enum):
    OVERVIEW = "overview"
    SALES = "sales"
    PRODUCTS = "products"
    USERS = "users"


@dataclass(frozen=True)
class CategoryRevenue:
    category: str
    revenue: Decimal


@dataclass(frozen=True)
class OverviewReport:
    """Headline numbers for the selected window.

    ``average_order_value`` and ``completion_rate`` are 0 when there are
    no orders. ``completion_rate`` is on a 0-100 scale.
    """

    total_revenue: Decimal
    total_orders: int
    average_order_value: Decimal
    completion_rate: Decimal
    top_categories: list[CategoryRevenue] = field(default_factory=list)


@dataclass(frozen=True)
class DailySales:
    """Orders and revenue for one calendar day (ISO date string)."""

    day: str
    orders: int
    revenue: Decimal


@dataclass(frozen=True)
class SalesReport:
    daily_sales: list[DailySales]
    total_revenue: Decimal
    total_orders: int


@dataclass(frozen=True)
class ProductSales:
    """Sold quantity and revenue for one product.

    ``category`` and ``count_in_stock`` are None for products that appear
    in order lines but are missing from the product snapshot.
    """

    product_id: UUID | None
    name: str
    category: str | None
    count_in_stock: int | None
    sales: int
    revenue: Decimal

    @property
    def is_low_stock(self) -> bool:
        return self.count_in_stock is not None and (
            self.count_in_stock < LOW_STOCK_THRESHOLD
        )


@dataclass(frozen=True)
class ProductsReport:
    product_sales: list[ProductSales]
    total_products: int
    low_stock_products: int


@dataclass(frozen=True)
class CustomerSummary:
    user_id: UUID
    orders: int
    total_spent: Decimal

    @property
    def average_order_value(self) -> Decimal:
        if self.orders == 0:
            return Decimal("0")
        return (self.total_spent / self.orders).quantize(Decimal("0.01"))


@dataclass(frozen=True)
class UsersReport:
    unique_customers: int
    repeat_customers: int
    customers: list[CustomerSummary]


Report = OverviewReport | SalesReport | ProductsReport | UsersReport
