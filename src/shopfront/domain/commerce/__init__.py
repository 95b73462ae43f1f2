"""Commerce domain - orders and products as read-only snapshots.

Orders and products are owned by the storefront; this service only
reads them to compute reports and dashboard statistics.
"""

from shopfront.domain.commerce.entities import Order, OrderItem, Product
from shopfront.domain.commerce.repositories import OrderRepository, ProductRepository

LOW_STOCK_THRESHOLD = 10

__all__ = [
    "LOW_STOCK_THRESHOLD",
    "Order",
    "OrderItem",
    "OrderRepository",
    "Product",
    "ProductRepository",
]
