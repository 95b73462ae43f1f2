"""Admin report query: loads snapshots and runs the reporting aggregator."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional
from zoneinfo import ZoneInfo

from shopfront.domain.commerce import OrderRepository, ProductRepository
from shopfront.domain.reporting import (
    Report,
    ReportType,
    filter_orders_by_window,
    overview_report,
    products_report,
    sales_report,
    users_report,
)
from shopfront.domain.shared import ValidationError, utc_now

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ReportQuery:
    """Compute one of the admin reports over a trailing window of days."""

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
        timezone: str = "UTC",
    ):
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._tz = ZoneInfo(timezone)

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        timezone: str = "UTC",
    ) -> ReportQuery:
        return cls(
            order_repository=factory.order_repository(),
            product_repository=factory.product_repository(),
            timezone=timezone,
        )

    async def execute(
        self,
        report_type: ReportType,
        days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Report:
        """
        Build a report.

        Parameters
        ----------
        report_type
            overview, sales, products or users
        days
            Trailing window in days; None includes every order
        now
            Window end, defaults to the current UTC time

        Returns
        -------
        The report record for ``report_type``
        """
        if days is not None and days < 0:
            msg = "days must not be negative"
            raise ValidationError(msg, details={"days": days})

        now = now or utc_now()
        since = now - timedelta(days=days) if days is not None else None

        loaded = await self._order_repo.list_since(since)
        orders = filter_orders_by_window(loaded, days, now)
        logger.debug(
            "Building %s report over %d orders (days=%s)",
            report_type.value,
            len(orders),
            days,
        )

        if report_type is ReportType.SALES:
            return sales_report(orders, self._tz)
        if report_type is ReportType.USERS:
            return users_report(orders)

        products = await self._product_repo.list_all()
        if report_type is ReportType.PRODUCTS:
            return products_report(orders, products)
        return overview_report(orders, products)
