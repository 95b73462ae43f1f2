"""FastAPI dependency injection for the Shopfront API.

Provides dependencies for:
- Database sessions
- Authentication and authorization (principal from JWT)
- The bootstrap gate
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator, Callable, Coroutine, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shopfront.application.context import Principal
from shopfront.application.services import (
    AuthenticationService,
    AuthorizationDecision,
    Authorizer,
    BootstrapGate,
    SuperUserService,
)
from shopfront.domain.user import Role
from shopfront.infrastructure.persistence.sqlalchemy.models import Base
from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from shopfront.presentation.api.config import get_api_settings
from shopfront_auth import JWTService, PasswordHashingService
from shopfront_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_user_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Password hashing for regular users and admins."""
    return PasswordHashingService(
        rounds=settings.bcrypt_user_rounds,
        min_length=settings.password_min_length,
    )


def get_superuser_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Password hashing for the superuser (separate work factor)."""
    return PasswordHashingService(
        rounds=settings.bcrypt_superuser_rounds,
        min_length=settings.password_min_length,
    )


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
UserPasswordService = Annotated[
    PasswordHashingService,
    Depends(get_user_password_service),
]
SuperUserPasswordService = Annotated[
    PasswordHashingService,
    Depends(get_superuser_password_service),
]


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: JWTServiceDep,
    user_passwords: UserPasswordService,
    superuser_passwords: SuperUserPasswordService,
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, signin and profile updates.
    """
    return AuthenticationService(
        user_repository=factory.user_repository(),
        superuser_repository=factory.superuser_repository(),
        user_password_service=user_passwords,
        superuser_password_service=superuser_passwords,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_superuser_service(
    factory: RepoFactory,
    jwt_service: JWTServiceDep,
    superuser_passwords: SuperUserPasswordService,
    settings: SettingsDep,
) -> SuperUserService:
    return SuperUserService(
        superuser_repository=factory.superuser_repository(),
        password_service=superuser_passwords,
        jwt_service=jwt_service,
        allow_override=settings.superuser_bootstrap_override,
    )


SuperUserSvc = Annotated[SuperUserService, Depends(get_superuser_service)]


# -----------------------------------------------------------------------------
# Bootstrap Gate
# -----------------------------------------------------------------------------


async def require_ready(factory: RepoFactory) -> None:
    """Block gated routes until an active superuser exists."""
    gate = BootstrapGate(factory.superuser_repository())
    await gate.ensure_ready()


# -----------------------------------------------------------------------------
# Principal (JWT Authentication) & Authorization
# -----------------------------------------------------------------------------


def get_authorizer(jwt_service: JWTServiceDep) -> Authorizer:
    return Authorizer(jwt_service)


AuthorizerDep = Annotated[Authorizer, Depends(get_authorizer)]


def ensure_allowed(
    decision: AuthorizationDecision,
    request: Request,
    principal: Principal | None,
) -> None:
    """Log a denial at WARNING and raise the matching domain exception."""
    if decision.allowed:
        return
    logger.warning(
        "Access denied on %s %s for %s: %s (%s)",
        request.method,
        request.url.path,
        principal or "anonymous",
        decision.message,
        decision.reason.value if decision.reason else "",
    )
    decision.raise_for_denial()


def _require_role(
    role: Role,
) -> Callable[..., Coroutine[Any, Any, Principal]]:
    async def dependency(
        request: Request,
        authorizer: AuthorizerDep,
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
    ) -> Principal:
        token = credentials.credentials if credentials else None
        principal, decision = authorizer.check(token, role)
        ensure_allowed(decision, request, principal)
        # allowed decisions always carry a principal
        assert principal is not None  # NOQA: S101
        return principal

    return dependency


get_current_principal = _require_role(Role.USER)
require_admin = _require_role(Role.ADMIN)
require_superuser = _require_role(Role.SUPERUSER)

# Type aliases for injected principals
CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
AdminPrincipal = Annotated[Principal, Depends(require_admin)]
SuperUserPrincipal = Annotated[Principal, Depends(require_superuser)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def stats(factory: RepoFactory, ...):
#       query = AdminStatsQuery.from_factory(factory)  # NOQA: ERA001
