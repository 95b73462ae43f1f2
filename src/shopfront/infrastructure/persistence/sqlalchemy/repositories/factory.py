"""SQLAlchemy repository factory for request-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.infrastructure.persistence.sqlalchemy.repositories.order_repository import (  # NOQA: E501
    OrderRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.product_repository import (  # NOQA: E501
    ProductRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.superuser_repository import (  # NOQA: E501
    SuperUserRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._superuser_repo: SuperUserRepositorySQLAlchemy | None = None
        self._order_repo: OrderRepositorySQLAlchemy | None = None
        self._product_repo: ProductRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def superuser_repository(self) -> SuperUserRepositorySQLAlchemy:
        if self._superuser_repo is None:
            self._superuser_repo = SuperUserRepositorySQLAlchemy(self._session)
        return self._superuser_repo

    def order_repository(self) -> OrderRepositorySQLAlchemy:
        if self._order_repo is None:
            self._order_repo = OrderRepositorySQLAlchemy(self._session)
        return self._order_repo

    def product_repository(self) -> ProductRepositorySQLAlchemy:
        if self._product_repo is None:
            self._product_repo = ProductRepositorySQLAlchemy(self._session)
        return self._product_repo
