"""Shopfront Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the storefront domain. It handles:
- Password hashing (bcrypt)
- JWT session token creation and verification

Architecture:
    shopfront_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from shopfront_auth import PasswordHashingService, JWTService
"""

from shopfront_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from shopfront_auth.schemas import TokenPayload
from shopfront_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
