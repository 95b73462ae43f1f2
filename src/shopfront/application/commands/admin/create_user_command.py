import logging

from shopfront.application.services.credentials import hash_password, require_fields
from shopfront.domain.user import Email, EmailAlreadyExistsError, User, UserRepository
from shopfront_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a user on behalf of an admin."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(
        self,
        name: str,
        email: str,
        password: str,
        is_admin: bool = False,
    ) -> User:
        require_fields(name=name, email=email, password=password)
        email_obj = Email(email)

        if await self._user_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = hash_password(self._password_service, password)
        user = User.create(
            name=name,
            email=email_obj,
            password_hash=password_hash,
            is_admin=is_admin,
        )
        await self._user_repo.save(user)

        logger.info("Admin created user: %s (admin=%s)", user.email, user.is_admin)
        return user
