"""SQLAlchemy implementation of SuperUserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.shared.time import ensure_tz_aware
from shopfront.domain.user import (
    Email,
    EmailAlreadyExistsError,
    SuperUser,
    SuperUserAlreadyExistsError,
    SuperUserRepository,
)
from shopfront.infrastructure.persistence.sqlalchemy.models import SuperUserModel
from shopfront.infrastructure.persistence.sqlalchemy.models.superuser_model import (
    EMAIL_INDEX,
    SINGLE_ACTIVE_INDEX,
)

logger = logging.getLogger(__name__)


class SuperUserRepositorySQLAlchemy(SuperUserRepository):
    """SQLAlchemy implementation of the SuperUserRepository interface.

    The partial unique index on ``is_active`` closes the race between the
    service's pre-check and the insert; a violation surfaces here as
    SuperUserAlreadyExistsError.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_active(self) -> SuperUser | None:
        stmt = select(SuperUserModel).where(SuperUserModel.is_active.is_(True))
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._map_to_domain(model) if model else None

    async def count_active(self) -> int:
        stmt = (
            select(func.count())
            .select_from(SuperUserModel)
            .where(SuperUserModel.is_active.is_(True))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def find_by_id(self, superuser_id: UUID) -> SuperUser | None:
        model = await self._find_model_by_id(superuser_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> SuperUser | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(SuperUserModel).where(SuperUserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        return await self.find_by_email(email) is not None

    async def save(self, superuser: SuperUser) -> None:
        existing = await self._find_model_by_id(superuser.id)

        try:
            if existing:
                self._update_model(existing, superuser)
                logger.debug("Updated superuser: %s", superuser.id)
            else:
                self._session.add(self._map_to_model(superuser))
                logger.debug("Created superuser: %s", superuser.id)

            await self._session.flush()
        except IntegrityError as e:
            # only the driver message names the violated index; str(e) also
            # carries the INSERT statement, which always mentions email
            violation = str(e.orig).lower()
            if SINGLE_ACTIVE_INDEX in violation or "superusers.is_active" in violation:
                raise SuperUserAlreadyExistsError from e
            if EMAIL_INDEX in violation or "superusers.email" in violation:
                raise EmailAlreadyExistsError(superuser.email) from e
            raise

    async def find_by_ids(self, superuser_ids: list[UUID]) -> dict[UUID, SuperUser]:
        if not superuser_ids:
            return {}
        stmt = select(SuperUserModel).where(SuperUserModel.id.in_(superuser_ids))
        result = await self._session.execute(stmt)
        return {m.id: self._map_to_domain(m) for m in result.scalars().all()}

    async def _find_model_by_id(self, superuser_id: UUID) -> SuperUserModel | None:
        stmt = select(SuperUserModel).where(SuperUserModel.id == superuser_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: SuperUserModel) -> SuperUser:
        return SuperUser.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            is_active=model.is_active,
            created_by=model.created_by,
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, superuser: SuperUser) -> SuperUserModel:
        return SuperUserModel(
            id=superuser.id,
            name=superuser.name,
            email=superuser.email,
            password_hash=superuser.password_hash,
            role=superuser.role.value,
            is_active=superuser.is_active,
            created_by=superuser.created_by,
            last_login_at=superuser.last_login_at,
            created_at=superuser.created_at,
            updated_at=superuser.updated_at,
        )

    def _update_model(self, model: SuperUserModel, superuser: SuperUser) -> None:
        model.name = superuser.name
        model.email = superuser.email
        model.password_hash = superuser.password_hash
        model.is_active = superuser.is_active
        model.last_login_at = superuser.last_login_at
        model.updated_at = superuser.updated_at
