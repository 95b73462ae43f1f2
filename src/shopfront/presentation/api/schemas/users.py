"""User authentication and profile schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Fields are optional at the schema level so missing and blank values
    produce the same ``MISSING_FIELD`` error.
    """

    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="User's email address")
    password: Optional[str] = Field(
        default=None,
        description="Password (at least 6 characters, at most 72 bytes)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "secret123",
            },
        },
    )


class SigninRequest(BaseModel):
    """Request schema for signin (users, admins and the superuser)."""

    email: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "password": "secret123",
            },
        },
    )


class UpdateProfileRequest(BaseModel):
    """Partial profile update. Omitted fields are left unchanged."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, max_length=72)


class UserResponse(BaseModel):
    """Public user fields."""

    id: UUID
    name: str
    email: str
    is_admin: bool
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Public identity fields plus a session token."""

    id: UUID
    name: str
    email: str
    is_admin: bool
    role: str
    token: str
    token_type: str = Field(default="bearer")
