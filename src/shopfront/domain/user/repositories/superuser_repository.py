"""SuperUser repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from shopfront.domain.user.aggregates import SuperUser
from shopfront.domain.user.value_objects import Email


class SuperUserRepository(ABC):
    """Repository interface for SuperUser aggregates."""

    @abstractmethod
    async def find_active(self) -> Optional[SuperUser]:
        """Return the active superuser, if any."""

    @abstractmethod
    async def count_active(self) -> int:
        """Count superusers whose active flag is set."""

    @abstractmethod
    async def find_by_id(self, superuser_id: UUID) -> Optional[SuperUser]:
        """Find a superuser (active or not) by ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[SuperUser]:
        """Find a superuser (active or not) by email."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if any superuser record uses the given email."""

    @abstractmethod
    async def save(self, superuser: SuperUser) -> None:
        """Save or update a superuser.

        Raises
        ------
        SuperUserAlreadyExistsError
            If saving would leave two active superusers.
        """

    @abstractmethod
    async def find_by_ids(self, superuser_ids: list[UUID]) -> dict[UUID, SuperUser]:
        """Load several superusers at once, keyed by ID."""
