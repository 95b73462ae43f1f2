"""Value objects for the user domain."""

from shopfront.domain.user.value_objects.email import Email
from shopfront.domain.user.value_objects.name import normalize_name
from shopfront.domain.user.value_objects.role import Role

__all__ = [
    "Email",
    "Role",
    "normalize_name",
]
