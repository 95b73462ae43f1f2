"""Authentication service for registration, signin and profile updates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from shopfront.application.services.credentials import hash_password, require_fields
from shopfront.domain.shared import AuthenticationError
from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    SuperUser,
    User,
    UserNotFoundError,
)
from shopfront_auth import JWTService, PasswordHashingService, WeakPasswordError

if TYPE_CHECKING:
    from shopfront.domain.user import SuperUserRepository, UserRepository

logger = logging.getLogger(__name__)

Identity = Union[User, SuperUser]


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates shopfront_auth infrastructure (password hashing, JWT tokens)
    with the User and SuperUser aggregates to provide:
    - User registration
    - Signin with superuser-first dispatch
    - Profile reads and partial updates

    Regular users and the superuser are hashed by separate password
    services so each can carry its own bcrypt cost.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        superuser_repository: SuperUserRepository,
        user_password_service: PasswordHashingService,
        superuser_password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._superuser_repo = superuser_repository
        self._user_passwords = user_password_service
        self._superuser_passwords = superuser_password_service
        self._jwt_service = jwt_service

    def issue_token(self, identity: Identity) -> str:
        return self._jwt_service.create_access_token(
            subject_id=identity.id,
            email=identity.email,
            role=identity.role.value,
        )

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        """Register a regular user and return it with a session token.

        Raises
        ------
        MissingFieldError
            If name, email or password is missing
        InvalidEmailError
            If the email is malformed
        WeakPasswordError
            If the password violates the length policy
        EmailAlreadyExistsError
            If the email is already registered
        """
        require_fields(name=name, email=email, password=password)
        email_obj = Email(email)

        if await self._user_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = hash_password(self._user_passwords, password)
        user = User.create(name=name, email=email_obj, password_hash=password_hash)
        await self._user_repo.save(user)

        logger.info("User registered: %s", user.email)
        return user, self.issue_token(user)

    async def signin(self, email: str, password: str) -> tuple[Identity, str]:
        """Authenticate with email and password.

        While an active superuser exists it is tried first; otherwise, or
        when it does not match, the regular user store is consulted.

        Raises
        ------
        AuthenticationError
            With the same message for every failure
        """
        email_obj = self._parse_signin_email(email)
        if email_obj is None or not password:
            raise AuthenticationError

        superuser = await self._match_active_superuser(email_obj, password)
        if superuser is not None:
            return superuser, self.issue_token(superuser)

        user = await self._user_repo.find_by_email(email_obj)
        if user is None or not self._user_passwords.verify(
            password,
            user.password_hash,
        ):
            logger.info("Failed signin attempt")
            raise AuthenticationError

        if self._upgrade_hash(self._user_passwords, user, password):
            await self._user_repo.save(user)

        logger.info("User signed in: %s (role: %s)", user.email, user.role.value)
        return user, self.issue_token(user)

    async def superuser_signin(
        self,
        email: str,
        password: str,
    ) -> tuple[SuperUser, str]:
        """Authenticate against the active superuser only."""
        email_obj = self._parse_signin_email(email)
        if email_obj is None or not password:
            raise AuthenticationError

        superuser = await self._match_active_superuser(email_obj, password)
        if superuser is None:
            logger.info("Failed superuser signin attempt")
            raise AuthenticationError
        return superuser, self.issue_token(superuser)

    async def get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def update_user_profile(
        self,
        user_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        """Apply a partial profile update. Omitted fields are left alone."""
        user = await self.get_user(user_id)

        if name is not None:
            user.rename(name)

        if email is not None:
            email_obj = Email(email)
            if email_obj != user.email_obj:
                if await self._user_repo.exists_by_email(email_obj):
                    raise EmailAlreadyExistsError(email_obj.value)
                user.change_email(email_obj)

        # empty password keeps the current one
        if password:
            user.change_password_hash(hash_password(self._user_passwords, password))

        await self._user_repo.save(user)
        logger.info("Profile updated for user: %s", user.id)
        return user

    async def _match_active_superuser(
        self,
        email: Email,
        password: str,
    ) -> Optional[SuperUser]:
        if await self._superuser_repo.count_active() == 0:
            return None

        superuser = await self._superuser_repo.find_active()
        if superuser is None or superuser.email != email.value:
            return None
        if not self._superuser_passwords.verify(password, superuser.password_hash):
            return None

        superuser.record_login()
        self._upgrade_hash(self._superuser_passwords, superuser, password)
        await self._superuser_repo.save(superuser)

        logger.info("Superuser signed in: %s", superuser.email)
        return superuser

    @staticmethod
    def _parse_signin_email(email: str) -> Optional[Email]:
        try:
            return Email(email)
        except InvalidEmailError:
            return None

    @staticmethod
    def _upgrade_hash(
        password_service: PasswordHashingService,
        identity: Identity,
        password: str,
    ) -> bool:
        """Re-hash with the configured cost if the stored hash differs."""
        if not password_service.needs_rehash(identity.password_hash):
            return False
        try:
            identity.change_password_hash(password_service.hash(password))
        except WeakPasswordError:
            logger.debug("Skipping hash upgrade for legacy password: %s", identity.id)
            return False
        return True
