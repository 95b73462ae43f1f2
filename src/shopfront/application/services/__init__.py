"""Application services."""

from shopfront.application.services.authentication_service import (
    AuthenticationService,
)
from shopfront.application.services.authorizer import (
    Action,
    AuthorizationDecision,
    Authorizer,
    DenyReason,
    authorize,
)
from shopfront.application.services.bootstrap_gate import (
    BootstrapGate,
    BootstrapState,
)
from shopfront.application.services.superuser_service import (
    SuperUserService,
    SuperUserStatus,
)

__all__ = [
    "Action",
    "AuthenticationService",
    "AuthorizationDecision",
    "Authorizer",
    "BootstrapGate",
    "BootstrapState",
    "DenyReason",
    "SuperUserService",
    "SuperUserStatus",
    "authorize",
]
