"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from uuid import UUID

from shopfront.domain.shared.exceptions import (
    AuthorizationError,
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code=ErrorCode.INVALID_EMAIL)


class MissingFieldError(ValidationError):
    """Raised when a required field is missing or blank."""

    def __init__(self, *fields: str) -> None:
        names = ", ".join(fields)
        super().__init__(
            message=f"Missing required fields: {names}",
            code=ErrorCode.MISSING_FIELD,
            details={"fields": list(fields)},
        )


class WeakPasswordError(ValidationError):
    """Raised when a password does not meet the length policy."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code=ErrorCode.WEAK_PASSWORD)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message="User already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class SuperUserAlreadyExistsError(ConflictError):
    """An active superuser already exists."""

    def __init__(self) -> None:
        super().__init__(
            message="Superuser already exists",
            code=ErrorCode.SUPERUSER_ALREADY_EXISTS,
        )


class UserNotFoundError(NotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = str(user_id)
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": self.user_id},
        )


class SuperUserNotFoundError(NotFoundError):
    """No active superuser matches."""

    def __init__(self, superuser_id: UUID | str | None = None) -> None:
        super().__init__(
            message="Superuser not found",
            code=ErrorCode.SUPERUSER_NOT_FOUND,
            details={"superuser_id": str(superuser_id) if superuser_id else None},
        )


class CannotDeleteSelfError(AuthorizationError):
    """Cannot delete your own account."""

    def __init__(self) -> None:
        super().__init__(
            message="Cannot delete your own account",
            code=ErrorCode.CANNOT_DELETE_SELF,
        )
