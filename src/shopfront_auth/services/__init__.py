"""Authentication services.

Provides password hashing and JWT token management.
"""

from shopfront_auth.services.jwt_service import JWTService
from shopfront_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
