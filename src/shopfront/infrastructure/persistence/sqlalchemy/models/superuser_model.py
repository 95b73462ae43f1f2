"""SQLAlchemy model for SuperUser aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from shopfront.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

SINGLE_ACTIVE_INDEX = "uq_superusers_single_active"
EMAIL_INDEX = "ix_superusers_email"


class SuperUserModel(Base, TimestampMixin):
    """Database model for superusers.

    Data Integrity Constraints:
    - At most one row with is_active = true (partial unique index)
    - Email unique across all superuser rows, active or not
    """

    __tablename__ = "superusers"

    __table_args__ = (
        Index(
            SINGLE_ACTIVE_INDEX,
            "is_active",
            unique=True,
            sqlite_where=text("is_active"),
            postgresql_where=text("is_active"),
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20),
        default="superuser",
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_by: Mapped[str] = mapped_column(
        String(100),
        default="system",
        nullable=False,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<SuperUserModel(id={self.id}, email={self.email}, "
            f"active={self.is_active})>"
        )
