"""Superuser bootstrap and profile schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class SuperUserCheckResponse(BaseModel):
    """Whether the one-time superuser setup has been completed."""

    exists: bool
    count: int
    setup_required: bool


class CreateSuperUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = Field(
        default=None,
        description="Password (at least 6 characters, at most 72 bytes)",
    )


class UpdateSuperUserRequest(BaseModel):
    """Partial profile update for the active superuser."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, max_length=72)


class SuperUserProfileResponse(BaseModel):
    id: UUID
    name: str
    email: str
    role: str
    is_admin: bool
    is_active: bool
    created_by: str
    last_login_at: Optional[datetime]
    created_at: datetime


class SuperUserAuthResponse(SuperUserProfileResponse):
    """Superuser profile plus a freshly issued session token."""

    token: str
    token_type: str = Field(default="bearer")
