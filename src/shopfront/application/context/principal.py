"""Principal context for request-scoped identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.user import Role

if TYPE_CHECKING:
    from shopfront.domain.user import SuperUser, User
    from shopfront_auth import TokenPayload


@dataclass(frozen=True)
class Principal:
    """
    Immutable identity decoded from a verified session token.

    Created once per request and handed to authorization checks and
    commands. Never persisted.
    """

    subject_id: UUID
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    @property
    def is_superuser(self) -> bool:
        return self.role == Role.SUPERUSER

    @classmethod
    def from_identity(cls, identity: User | SuperUser) -> Principal:
        return cls(subject_id=identity.id, email=identity.email, role=identity.role)

    @classmethod
    def from_token(cls, payload: TokenPayload) -> Principal:
        return cls(
            subject_id=payload.subject_id,
            email=payload.email,
            role=Role(payload.role),
        )

    def __str__(self) -> str:
        return f"Principal({self.email}, {self.role.value})"
