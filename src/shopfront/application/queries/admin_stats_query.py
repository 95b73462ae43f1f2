"""Admin dashboard statistics query."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.application.dtos import AdminStats, OrderCustomer, RecentOrder
from shopfront.domain.commerce import (
    LOW_STOCK_THRESHOLD,
    Order,
    OrderRepository,
    ProductRepository,
)
from shopfront.domain.user import (
    SuperUser,
    SuperUserRepository,
    User,
    UserRepository,
)

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

RECENT_ORDER_LIMIT = 5


class AdminStatsQuery:
    """Query to compute the admin dashboard counters."""

    def __init__(
        self,
        user_repository: UserRepository,
        superuser_repository: SuperUserRepository,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
    ):
        self._user_repo = user_repository
        self._superuser_repo = superuser_repository
        self._order_repo = order_repository
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AdminStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            superuser_repository=factory.superuser_repository(),
            order_repository=factory.order_repository(),
            product_repository=factory.product_repository(),
        )

    async def execute(self) -> AdminStats:
        recent = await self._order_repo.list_recent(limit=RECENT_ORDER_LIMIT)

        return AdminStats(
            total_users=await self._user_repo.count(),
            total_products=await self._product_repo.count(),
            total_orders=await self._order_repo.count(),
            total_revenue=await self._order_repo.sum_paid_revenue(),
            low_stock_products=await self._product_repo.count_low_stock(
                LOW_STOCK_THRESHOLD,
            ),
            recent_orders=await self._with_customers(recent),
        )

    async def _with_customers(self, orders: list[Order]) -> list[RecentOrder]:
        # orders may reference a user or the superuser
        ids = list({o.user_id for o in orders if o.user_id is not None})
        customers: dict[UUID, User | SuperUser] = {}
        if ids:
            customers.update(await self._superuser_repo.find_by_ids(ids))
            customers.update(await self._user_repo.find_by_ids(ids))

        result = []
        for order in orders:
            identity = customers.get(order.user_id)
            result.append(
                RecentOrder(
                    id=order.id,
                    total_price=order.total_price,
                    is_paid=order.is_paid,
                    is_delivered=order.is_delivered,
                    created_at=order.created_at,
                    user=OrderCustomer(
                        id=identity.id,
                        name=identity.name,
                        email=identity.email,
                    )
                    if identity is not None
                    else None,
                ),
            )
        return result
