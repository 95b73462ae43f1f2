"""Admin dashboard DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass
class OrderCustomer:
    """Name and email of the identity that placed an order."""

    id: UUID
    name: str
    email: str


@dataclass
class RecentOrder:
    id: UUID
    total_price: Decimal
    is_paid: bool
    is_delivered: bool
    created_at: datetime
    user: OrderCustomer | None = None


@dataclass
class AdminStats:
    """Aggregate counts for the admin dashboard.

    ``total_revenue`` only includes paid orders.
    """

    total_users: int
    total_products: int
    total_orders: int
    total_revenue: Decimal
    low_stock_products: int
    recent_orders: list[RecentOrder] = field(default_factory=list)
