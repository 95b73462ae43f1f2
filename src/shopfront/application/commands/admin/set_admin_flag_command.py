import logging
from typing import Optional
from uuid import UUID

from shopfront.domain.user import User, UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class SetAdminFlagCommand:
    """Command to set or toggle a user's admin flag."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID, is_admin: Optional[bool] = None) -> User:
        """Set the flag to ``is_admin``, or flip it when None."""
        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        if is_admin is None:
            user.toggle_admin()
        else:
            user.set_admin(is_admin)

        await self._user_repo.save(user)
        logger.info("Admin flag for user %s set to %s", user.id, user.is_admin)
        return user
