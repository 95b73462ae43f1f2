from shopfront.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
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

__all__ = [
    "OrderRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "SuperUserRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
