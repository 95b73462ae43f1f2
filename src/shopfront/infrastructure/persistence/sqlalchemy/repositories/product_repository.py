"""SQLAlchemy read repository for products."""

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.commerce import Product, ProductRepository
from shopfront.domain.shared.time import ensure_tz_aware
from shopfront.infrastructure.persistence.sqlalchemy.models import ProductModel


class ProductRepositorySQLAlchemy(ProductRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(ProductModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def count_low_stock(self, threshold: int) -> int:
        stmt = (
            select(func.count())
            .select_from(ProductModel)
            .where(ProductModel.count_in_stock < threshold)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            category=model.category,
            price=Decimal(str(model.price)),
            count_in_stock=model.count_in_stock,
            created_at=ensure_tz_aware(model.created_at),
        )
