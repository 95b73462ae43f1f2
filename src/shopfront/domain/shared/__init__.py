from shopfront.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainException,
    ErrorCode,
    InternalError,
    NotFoundError,
    SetupRequiredError,
    ValidationError,
)
from shopfront.domain.shared.time import ensure_tz_aware, local_day, utc_now

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "InternalError",
    "NotFoundError",
    "SetupRequiredError",
    "ValidationError",
    "ensure_tz_aware",
    "local_day",
    "utc_now",
]
