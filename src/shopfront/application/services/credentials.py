"""Input checks and password hashing shared by the auth use cases."""

from shopfront.domain.user import MissingFieldError, WeakPasswordError
from shopfront_auth import PasswordHashingService
from shopfront_auth import WeakPasswordError as AuthWeakPasswordError


def require_fields(**values: str | None) -> None:
    """Raise MissingFieldError naming every missing or blank value."""
    missing = [name for name, value in values.items() if not value or not value.strip()]
    if missing:
        raise MissingFieldError(*missing)


def hash_password(password_service: PasswordHashingService, password: str) -> str:
    """Hash a new secret, translating the length policy into a domain error."""
    try:
        return password_service.hash(password)
    except AuthWeakPasswordError as e:
        raise WeakPasswordError(e.message) from e
