import logging
from uuid import UUID

from shopfront.domain.user import CannotDeleteSelfError, UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to hard-delete a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: UUID, requesting_admin_id: UUID) -> None:
        if user_id == requesting_admin_id:
            raise CannotDeleteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        await self._user_repo.delete(user_id)
        logger.info("Admin %s deleted user %s", requesting_admin_id, user_id)
