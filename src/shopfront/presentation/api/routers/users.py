"""User router for registration, signin and self-service profile access."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from shopfront.application.services import Action, authorize
from shopfront.domain.user import Role, SuperUser, User
from shopfront.presentation.api.dependencies import (
    AuthService,
    CurrentPrincipal,
    DBSession,
    ensure_allowed,
    require_ready,
)
from shopfront.presentation.api.schemas.users import (
    AuthResponse,
    RegisterRequest,
    SigninRequest,
    UpdateProfileRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(identity: User | SuperUser, token: str) -> AuthResponse:
    return AuthResponse(
        id=identity.id,
        name=identity.name,
        email=identity.email,
        is_admin=identity.is_admin,
        role=identity.role.value,
        token=token,
    )


def _to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        is_admin=user.is_admin,
        role=user.role.value,
        created_at=user.created_at,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    dependencies=[Depends(require_ready)],
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Missing fields, weak password or email taken"},
        503: {"description": "Superuser setup required"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    user, token = await auth_service.register(
        name=request.name or "",
        email=request.email or "",
        password=request.password or "",
    )
    await session.commit()
    return _create_auth_response(user, token)


@router.post(
    "/signin",
    summary="Sign in with email and password",
    responses={
        200: {"description": "Signed in; token role resolved from the account"},
        401: {"description": "Invalid email or password"},
    },
)
async def signin(
    request: SigninRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Sign in as a user, an admin or the superuser.

    The active superuser is matched first; otherwise the regular user store
    decides. Every failure returns the same message.
    """
    identity, token = await auth_service.signin(request.email, request.password)
    # persists last-login and hash upgrades
    await session.commit()
    return _create_auth_response(identity, token)


@router.get(
    "/{user_id}",
    summary="Get a user profile",
    dependencies=[Depends(require_ready)],
    responses={
        200: {"description": "User profile"},
        401: {"description": "Missing or invalid token"},
        403: {"description": "Not your account"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    http_request: Request,
    principal: CurrentPrincipal,
    auth_service: AuthService,
) -> UserResponse:
    decision = authorize(
        principal,
        Role.USER,
        action=Action.MANAGE_OWN_ACCOUNT,
        target_id=user_id,
    )
    ensure_allowed(decision, http_request, principal)

    user = await auth_service.get_user(user_id)
    return _to_user_response(user)


@router.put(
    "/{user_id}",
    summary="Update a user profile",
    dependencies=[Depends(require_ready)],
    responses={
        200: {"description": "Updated profile"},
        400: {"description": "Invalid input or email taken"},
        401: {"description": "Missing or invalid token"},
        403: {"description": "Not your account"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateProfileRequest,
    http_request: Request,
    principal: CurrentPrincipal,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """Partially update name, email or password. Omitted fields are kept."""
    decision = authorize(
        principal,
        Role.USER,
        action=Action.MANAGE_OWN_ACCOUNT,
        target_id=user_id,
    )
    ensure_allowed(decision, http_request, principal)

    user = await auth_service.update_user_profile(
        user_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    logger.info("Profile of user %s updated by %s", user_id, principal.email)
    return _to_user_response(user)
