"""List all regular users for the admin user table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopfront.domain.user import User, UserRepository

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory


class ListUsersQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> list[User]:
        return await self._user_repo.list_all()
