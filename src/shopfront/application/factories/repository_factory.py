"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from shopfront.domain.commerce import OrderRepository, ProductRepository
from shopfront.domain.user import SuperUserRepository, UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def superuser_repository(self) -> SuperUserRepository:
        """Get superuser repository."""
        ...

    def order_repository(self) -> OrderRepository:
        """Get order repository."""
        ...

    def product_repository(self) -> ProductRepository:
        """Get product repository."""
        ...
