from shopfront.domain.user.aggregates.superuser import SuperUser
from shopfront.domain.user.aggregates.user import User

__all__ = ["SuperUser", "User"]
