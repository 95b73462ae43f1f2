"""Superuser bootstrap and profile management."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from shopfront.application.services.credentials import hash_password, require_fields
from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    SuperUser,
    SuperUserAlreadyExistsError,
    SuperUserNotFoundError,
)
from shopfront_auth import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from shopfront.domain.user import SuperUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuperUserStatus:
    exists: bool
    count: int


class SuperUserService:
    """
    Application service for the singleton superuser.

    Creation is refused while an active superuser exists. The only way
    around that is the bootstrap override, which must be enabled in
    configuration and requested explicitly; it deactivates the current
    superuser before creating the new one and leaves an audit log line.
    """

    def __init__(
        self,
        superuser_repository: SuperUserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        allow_override: bool = False,
    ):
        self._superuser_repo = superuser_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._allow_override = allow_override

    async def check(self) -> SuperUserStatus:
        count = await self._superuser_repo.count_active()
        return SuperUserStatus(exists=count > 0, count=count)

    async def create(
        self,
        name: str,
        email: str,
        password: str,
        force: bool = False,
    ) -> tuple[SuperUser, str]:
        """Create the superuser and return it with a session token.

        Parameters
        ----------
        name
            Display name
        email
            Email address (lowercased)
        password
            Plaintext secret, hashed with the superuser work factor
        force
            Request the bootstrap override. Ignored unless enabled.

        Raises
        ------
        MissingFieldError
            If a field is missing
        WeakPasswordError
            If the password is shorter than the minimum length
        SuperUserAlreadyExistsError
            If an active superuser exists and no override applies
        EmailAlreadyExistsError
            If a superuser record already uses the email
        """
        require_fields(name=name, email=email, password=password)
        email_obj = Email(email)

        active = await self._superuser_repo.find_active()
        override = active is not None and self._use_override(force)
        if active is not None and not override:
            raise SuperUserAlreadyExistsError

        if await self._superuser_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = hash_password(self._password_service, password)
        created_by = "system"

        if active is not None:
            logger.warning(
                "AUDIT bootstrap override: deactivating superuser %s (%s) "
                "to create %s",
                active.id,
                active.email,
                email_obj.value,
            )
            active.deactivate()
            await self._superuser_repo.save(active)
            created_by = f"override:{active.id}"

        superuser = SuperUser.create(
            name=name,
            email=email_obj,
            password_hash=password_hash,
            created_by=created_by,
        )
        await self._superuser_repo.save(superuser)

        logger.info("Superuser created: %s", superuser.email)
        return superuser, self._issue_token(superuser)

    async def get_profile(self, superuser_id: UUID) -> SuperUser:
        superuser = await self._superuser_repo.find_by_id(superuser_id)
        if superuser is None or not superuser.is_active:
            raise SuperUserNotFoundError(superuser_id)
        return superuser

    async def update_profile(
        self,
        superuser_id: UUID,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> tuple[SuperUser, str]:
        """Partially update the active superuser and re-issue its token."""
        superuser = await self.get_profile(superuser_id)

        if name is not None:
            superuser.rename(name)

        if email is not None:
            email_obj = Email(email)
            if email_obj.value != superuser.email:
                if await self._superuser_repo.exists_by_email(email_obj):
                    raise EmailAlreadyExistsError(email_obj.value)
                superuser.change_email(email_obj)

        # empty password keeps the current one
        if password:
            superuser.change_password_hash(
                hash_password(self._password_service, password),
            )

        await self._superuser_repo.save(superuser)
        logger.info("Superuser profile updated: %s", superuser.id)
        return superuser, self._issue_token(superuser)

    def _use_override(self, force: bool) -> bool:
        if not force:
            return False
        if not self._allow_override:
            logger.warning(
                "Bootstrap override requested but disabled by configuration",
            )
            return False
        return True

    def _issue_token(self, superuser: SuperUser) -> str:
        return self._jwt_service.create_access_token(
            subject_id=superuser.id,
            email=superuser.email,
            role=superuser.role.value,
        )
