"""Read repository interfaces for orders and products."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from shopfront.domain.commerce.entities import Order, Product


class OrderRepository(ABC):
    """Read-only access to orders."""

    @abstractmethod
    async def list_since(self, since: Optional[datetime] = None) -> list[Order]:
        """List orders created at or after ``since`` (all when None)."""

    @abstractmethod
    async def count(self) -> int:
        """Count all orders."""

    @abstractmethod
    async def sum_paid_revenue(self) -> Decimal:
        """Sum ``total_price`` over paid orders."""

    @abstractmethod
    async def list_recent(self, limit: int = 5) -> list[Order]:
        """Return the most recently created orders."""


class ProductRepository(ABC):
    """Read-only access to products."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """List all products."""

    @abstractmethod
    async def count(self) -> int:
        """Count all products."""

    @abstractmethod
    async def count_low_stock(self, threshold: int) -> int:
        """Count products with ``count_in_stock`` below ``threshold``."""
