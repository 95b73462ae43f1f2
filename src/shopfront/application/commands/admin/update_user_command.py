import logging
from typing import Optional
from uuid import UUID

from shopfront.application.services.credentials import hash_password
from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from shopfront_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Command to partially update any user's profile and admin flag."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        is_admin: Optional[bool] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        if name is not None:
            user.rename(name)

        if email is not None:
            email_obj = Email(email)
            if email_obj != user.email_obj:
                if await self._user_repo.exists_by_email(email_obj):
                    raise EmailAlreadyExistsError(email_obj.value)
                user.change_email(email_obj)

        # empty password means "keep the current one"
        if password:
            user.change_password_hash(hash_password(self._password_service, password))

        if is_admin is not None:
            user.set_admin(is_admin)

        await self._user_repo.save(user)
        logger.info("Admin updated user: %s", user.id)
        return user
