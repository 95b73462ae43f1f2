"""Auth schemas and data structures.

These are simple data classes used for transferring authentication
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    subject_id
        The unique identifier of the user or superuser
    email
        The identity's email address
    role
        Resolved role at issue time ("user", "admin" or "superuser")
    exp
        Token expiration timestamp
    """

    subject_id: UUID
    email: str
    role: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
