"""Role-based authorization over decoded session token claims.

``authorize`` is a pure function: it never touches storage and never logs.
The HTTP dependency layer logs denials and turns them into errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from shopfront.application.context import Principal
from shopfront.domain.shared import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
)
from shopfront.domain.user import Role
from shopfront_auth import InvalidTokenError, JWTService

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Operations with rules beyond the plain role check."""

    DELETE_USER = "delete_user"
    MANAGE_OWN_ACCOUNT = "manage_own_account"


class DenyReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of an authorization check.

    ``reason`` is None when access is allowed.
    """

    reason: Optional[DenyReason] = None
    message: str = ""
    code: ErrorCode = ErrorCode.FORBIDDEN

    @property
    def allowed(self) -> bool:
        return self.reason is None

    @classmethod
    def allow(cls) -> AuthorizationDecision:
        return cls()

    @classmethod
    def deny(
        cls,
        reason: DenyReason,
        message: str,
        code: ErrorCode = ErrorCode.FORBIDDEN,
    ) -> AuthorizationDecision:
        return cls(reason=reason, message=message, code=code)

    def raise_for_denial(self) -> None:
        """Raise the domain exception matching a denial (no-op when allowed)."""
        if self.reason is DenyReason.UNAUTHENTICATED:
            raise AuthenticationError(self.message)
        if self.reason is DenyReason.FORBIDDEN:
            raise AuthorizationError(self.message, code=self.code)


def authorize(
    principal: Optional[Principal],
    required_role: Role,
    *,
    action: Optional[Action] = None,
    target_id: Optional[UUID] = None,
) -> AuthorizationDecision:
    """Decide whether ``principal`` may perform an operation.

    Parameters
    ----------
    principal
        Identity from a verified token, or None when the token is missing,
        invalid or expired
    required_role
        Minimum role for the operation (user < admin < superuser)
    action
        Optional action with additional rules
    target_id
        Identity the operation acts upon, for self-related rules

    Returns
    -------
    Allow, or Deny with UNAUTHENTICATED / FORBIDDEN
    """
    if principal is None:
        return AuthorizationDecision.deny(
            DenyReason.UNAUTHENTICATED,
            "Not authorized, no valid token",
        )

    if not principal.role.satisfies(required_role):
        return AuthorizationDecision.deny(
            DenyReason.FORBIDDEN,
            f"{required_role.value.capitalize()} access required",
        )

    if action is Action.DELETE_USER and target_id == principal.subject_id:
        return AuthorizationDecision.deny(
            DenyReason.FORBIDDEN,
            "Cannot delete your own account",
            code=ErrorCode.CANNOT_DELETE_SELF,
        )

    if (
        action is Action.MANAGE_OWN_ACCOUNT
        and not principal.is_admin
        and target_id != principal.subject_id
    ):
        return AuthorizationDecision.deny(
            DenyReason.FORBIDDEN,
            "Not authorized to access this account",
        )

    return AuthorizationDecision.allow()


class Authorizer:
    """Decodes bearer tokens and applies ``authorize``."""

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    def decode(self, token: Optional[str]) -> Optional[Principal]:
        """Return the principal for a token, or None if it cannot be trusted."""
        if not token:
            return None
        try:
            payload = self._jwt_service.verify_token(token)
            return Principal.from_token(payload)
        except InvalidTokenError as e:
            logger.debug("Rejected session token: %s", e)
            return None
        except ValueError:
            logger.debug("Rejected session token with unknown role")
            return None

    def check(
        self,
        token: Optional[str],
        required_role: Role,
        *,
        action: Optional[Action] = None,
        target_id: Optional[UUID] = None,
    ) -> tuple[Optional[Principal], AuthorizationDecision]:
        principal = self.decode(token)
        decision = authorize(
            principal,
            required_role,
            action=action,
            target_id=target_id,
        )
        return principal, decision
