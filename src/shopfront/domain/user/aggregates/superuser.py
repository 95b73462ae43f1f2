"""SuperUser aggregate: the singleton highest-privilege identity."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from shopfront.domain.shared.time import utc_now
from shopfront.domain.user.value_objects import Email, Role, normalize_name

DEFAULT_CREATED_BY = "system"


class SuperUser:
    """
    SuperUser aggregate root.

    Distinct from admin-flagged users. At most one instance is active at a
    time; instances are deactivated, never removed.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        is_active: bool = True,
        created_by: str = DEFAULT_CREATED_BY,
        last_login_at: datetime | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = normalize_name(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._is_active = is_active
        self._created_by = created_by or DEFAULT_CREATED_BY
        self._last_login_at = last_login_at
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
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> Role:
        return Role.SUPERUSER

    @property
    def is_admin(self) -> bool:
        return True

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def last_login_at(self) -> datetime | None:
        return self._last_login_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def record_login(self) -> None:
        now = utc_now()
        # keep last_login_at monotonic
        if self._last_login_at is None or now >= self._last_login_at:
            self._last_login_at = now
        self._updated_at = now

    def deactivate(self) -> None:
        self._is_active = False
        self._updated_at = utc_now()

    def rename(self, name: str) -> None:
        self._name = normalize_name(name)
        self._updated_at = utc_now()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        created_by: str = DEFAULT_CREATED_BY,
    ) -> "SuperUser":
        superuser = cls(
            name=name,
            email=email,
            password_hash=password_hash,
            created_by=created_by,
        )
        superuser.record_login()
        return superuser

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        is_active: bool,
        created_by: str,
        last_login_at: datetime | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "SuperUser":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            is_active=is_active,
            created_by=created_by,
            last_login_at=last_login_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuperUser):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"SuperUser(id={self._id}, email={self._email.value})"
