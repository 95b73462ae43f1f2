from shopfront.domain.user.repositories.superuser_repository import (
    SuperUserRepository,
)
from shopfront.domain.user.repositories.user_repository import UserRepository

__all__ = ["SuperUserRepository", "UserRepository"]
