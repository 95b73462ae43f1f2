"""User domain - manages regular users, admins and the superuser.

This domain handles:
- User aggregate (identity, admin flag)
- SuperUser aggregate (singleton, soft-deactivated)
- Role ordering used by authorization

Design notes:
- IDs are random UUID4 generated at creation
- Emails are lowercased on construction
- User and SuperUser are disjoint identity spaces
- Repository interfaces defined here, implementations in infrastructure
"""

from shopfront.domain.user.aggregates import SuperUser, User
from shopfront.domain.user.exceptions import (
    CannotDeleteSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    MissingFieldError,
    SuperUserAlreadyExistsError,
    SuperUserNotFoundError,
    UserNotFoundError,
    WeakPasswordError,
)
from shopfront.domain.user.repositories import SuperUserRepository, UserRepository
from shopfront.domain.user.value_objects import Email, Role

__all__ = [
    "CannotDeleteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "MissingFieldError",
    "Role",
    "SuperUser",
    "SuperUserAlreadyExistsError",
    "SuperUserNotFoundError",
    "SuperUserRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "WeakPasswordError",
]
