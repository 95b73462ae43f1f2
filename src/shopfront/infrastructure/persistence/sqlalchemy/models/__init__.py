"""SQLAlchemy models. Importing this package registers every table."""

from shopfront.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.order_model import (
    OrderItemModel,
    OrderModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.product_model import (
    ProductModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.superuser_model import (
    SINGLE_ACTIVE_INDEX,
    SuperUserModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "OrderItemModel",
    "OrderModel",
    "ProductModel",
    "SINGLE_ACTIVE_INDEX",
    "SuperUserModel",
    "TimestampMixin",
    "UserModel",
]
