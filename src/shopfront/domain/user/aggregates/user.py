"""User aggregate for regular (optionally admin-flagged) accounts."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from shopfront.domain.shared.time import utc_now
from shopfront.domain.user.value_objects import Email, Role, normalize_name


class User:
    """
    User aggregate root.

    Holds identity, the bcrypt hash of the secret and the admin flag.
    The plaintext password never reaches this object.
    """

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        is_admin: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = normalize_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._is_admin = is_admin
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def role(self) -> Role:
        return Role.ADMIN if self._is_admin else Role.USER

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, name: str) -> None:
        self._name = normalize_name(name)
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def set_admin(self, is_admin: bool) -> None:
        self._is_admin = is_admin
        self._touch()

    def toggle_admin(self) -> bool:
        self.set_admin(not self._is_admin)
        return self._is_admin

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        is_admin: bool = False,
    ) -> "User":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            is_admin=is_admin,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        is_admin: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            is_admin=is_admin,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
