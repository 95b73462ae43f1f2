"""Superuser router: one-time setup, signin and profile."""

import logging

from fastapi import APIRouter, Depends, Query, status

from shopfront.domain.user import SuperUser
from shopfront.presentation.api.dependencies import (
    AuthService,
    DBSession,
    SuperUserPrincipal,
    SuperUserSvc,
    require_ready,
)
from shopfront.presentation.api.schemas.superuser import (
    CreateSuperUserRequest,
    SuperUserAuthResponse,
    SuperUserCheckResponse,
    SuperUserProfileResponse,
    UpdateSuperUserRequest,
)
from shopfront.presentation.api.schemas.users import SigninRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_profile(superuser: SuperUser) -> SuperUserProfileResponse:
    return SuperUserProfileResponse(
        id=superuser.id,
        name=superuser.name,
        email=superuser.email,
        role=superuser.role.value,
        is_admin=superuser.is_admin,
        is_active=superuser.is_active,
        created_by=superuser.created_by,
        last_login_at=superuser.last_login_at,
        created_at=superuser.created_at,
    )


def _to_auth_response(superuser: SuperUser, token: str) -> SuperUserAuthResponse:
    return SuperUserAuthResponse(
        **_to_profile(superuser).model_dump(),
        token=token,
    )


@router.get(
    "/check",
    summary="Check whether the superuser exists",
)
async def check_superuser(service: SuperUserSvc) -> SuperUserCheckResponse:
    status_ = await service.check()
    return SuperUserCheckResponse(
        exists=status_.exists,
        count=status_.count,
        setup_required=not status_.exists,
    )


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    summary="Create the superuser (one-time setup)",
    responses={
        201: {"description": "Superuser created"},
        400: {"description": "Missing fields, weak password or email taken"},
        403: {"description": "Superuser already exists"},
    },
)
async def create_superuser(
    request: CreateSuperUserRequest,
    service: SuperUserSvc,
    session: DBSession,
    force: bool = Query(
        default=False,
        description="Replace the active superuser (requires the override setting)",
    ),
) -> SuperUserAuthResponse:
    superuser, token = await service.create(
        name=request.name or "",
        email=request.email or "",
        password=request.password or "",
        force=force,
    )
    await session.commit()
    return _to_auth_response(superuser, token)


@router.post(
    "/signin",
    summary="Sign in as the superuser",
    responses={401: {"description": "Invalid email or password"}},
)
async def superuser_signin(
    request: SigninRequest,
    auth_service: AuthService,
    session: DBSession,
) -> SuperUserAuthResponse:
    superuser, token = await auth_service.superuser_signin(
        request.email,
        request.password,
    )
    await session.commit()
    return _to_auth_response(superuser, token)


@router.get(
    "/profile",
    summary="Get the superuser profile",
    dependencies=[Depends(require_ready)],
)
async def get_profile(
    principal: SuperUserPrincipal,
    service: SuperUserSvc,
) -> SuperUserProfileResponse:
    superuser = await service.get_profile(principal.subject_id)
    return _to_profile(superuser)


@router.put(
    "/profile",
    summary="Update the superuser profile",
    dependencies=[Depends(require_ready)],
    responses={
        200: {"description": "Updated profile with a re-issued token"},
        400: {"description": "Invalid input or email taken"},
        404: {"description": "Superuser not found or inactive"},
    },
)
async def update_profile(
    request: UpdateSuperUserRequest,
    principal: SuperUserPrincipal,
    service: SuperUserSvc,
    session: DBSession,
) -> SuperUserAuthResponse:
    superuser, token = await service.update_profile(
        principal.subject_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()
    return _to_auth_response(superuser, token)
