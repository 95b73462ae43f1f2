"""Read-only order and product snapshots consumed by reporting."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class OrderItem:
    """A single order line referencing a product."""

    product_id: UUID | None
    name: str
    qty: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.qty


@dataclass(frozen=True)
class Order:
    """An order placed by a user or the superuser.

    ``user_id`` may be None when the customer record no longer exists.
    """

    id: UUID
    user_id: UUID | None
    total_price: Decimal
    created_at: datetime
    is_paid: bool = False
    paid_at: datetime | None = None
    is_delivered: bool = False
    delivered_at: datetime | None = None
    items: tuple[OrderItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Product:
    id: UUID
    name: str
    category: str
    price: Decimal
    count_in_stock: int
    created_at: datetime | None = None
