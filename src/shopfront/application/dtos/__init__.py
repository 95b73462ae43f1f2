"""Data transfer objects returned by application queries."""

from shopfront.application.dtos.admin_stats_dto import (
    AdminStats,
    OrderCustomer,
    RecentOrder,
)

__all__ = ["AdminStats", "OrderCustomer", "RecentOrder"]
