"""SQLAlchemy read repository for orders."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.commerce import Order, OrderItem, OrderRepository
from shopfront.domain.shared.time import ensure_tz_aware
from shopfront.infrastructure.persistence.sqlalchemy.models import OrderModel


class OrderRepositorySQLAlchemy(OrderRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_since(self, since: Optional[datetime] = None) -> list[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at)
        if since is not None:
            stmt = stmt.where(OrderModel.created_at >= since)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(OrderModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def sum_paid_revenue(self) -> Decimal:
        stmt = select(func.coalesce(func.sum(OrderModel.total_price), 0)).where(
            OrderModel.is_paid.is_(True),
        )
        result = await self._session.execute(stmt)
        return Decimal(str(result.scalar_one()))

    async def list_recent(self, limit: int = 5) -> list[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc()).limit(limit)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    def _map_to_domain(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            total_price=Decimal(str(model.total_price)),
            created_at=ensure_tz_aware(model.created_at),
            is_paid=model.is_paid,
            paid_at=ensure_tz_aware(model.paid_at) if model.paid_at else None,
            is_delivered=model.is_delivered,
            delivered_at=(
                ensure_tz_aware(model.delivered_at) if model.delivered_at else None
            ),
            items=tuple(
                OrderItem(
                    product_id=item.product_id,
                    name=item.name,
                    qty=item.qty,
                    price=Decimal(str(item.price)),
                )
                for item in model.items
            ),
        )
