import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, status

from shopfront.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    SetAdminFlagCommand,
    UpdateUserCommand,
)
from shopfront.application.queries import AdminStatsQuery, ListUsersQuery
from shopfront.application.services import Action, authorize
from shopfront.domain.user import Role, User
from shopfront.presentation.api.dependencies import (
    AdminPrincipal,
    DBSession,
    RepoFactory,
    UserPasswordService,
    ensure_allowed,
    require_ready,
)
from shopfront.presentation.api.schemas.admin import (
    AdminStatsResponse,
    CreateUserRequest,
    ToggleAdminRequest,
    UpdateUserRequest,
    UserSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_ready)])


def _to_summary(user: User) -> UserSummaryResponse:
    return UserSummaryResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        is_admin=user.is_admin,
        created_at=user.created_at,
    )


@router.get(
    "/users",
    summary="List all users",
    responses={
        200: {"description": "List of all users, newest first"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    _admin: AdminPrincipal,  # Used for authorization check
    factory: RepoFactory,
) -> list[UserSummaryResponse]:
    """List all users."""
    users = await ListUsersQuery.from_factory(factory).execute()
    return [_to_summary(u) for u in users]


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Missing fields, weak password or email taken"},
        403: {"description": "Admin access required"},
    },
)
async def create_user(
    request: CreateUserRequest,
    admin: AdminPrincipal,
    factory: RepoFactory,
    session: DBSession,
    password_service: UserPasswordService,
) -> UserSummaryResponse:
    """Create a new user, optionally with the admin flag set."""
    command = CreateUserCommand(
        user_repository=factory.user_repository(),
        password_service=password_service,
    )
    user = await command.execute(
        name=request.name or "",
        email=request.email or "",
        password=request.password or "",
        is_admin=request.is_admin,
    )
    await session.commit()

    logger.info("Admin %s created user: %s", admin.email, user.email)
    return _to_summary(user)


@router.put(
    "/users/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User updated"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    admin: AdminPrincipal,
    factory: RepoFactory,
    session: DBSession,
    password_service: UserPasswordService,
) -> UserSummaryResponse:
    command = UpdateUserCommand(
        user_repository=factory.user_repository(),
        password_service=password_service,
    )
    user = await command.execute(
        user_id,
        name=request.name,
        email=request.email,
        password=request.password,
        is_admin=request.is_admin,
    )
    await session.commit()

    logger.info("Admin %s updated user %s", admin.email, user_id)
    return _to_summary(user)


@router.put(
    "/users/{user_id}/toggle-admin",
    summary="Toggle or set a user's admin flag",
    responses={
        200: {"description": "Admin flag changed"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def toggle_admin(
    user_id: UUID,
    admin: AdminPrincipal,
    factory: RepoFactory,
    session: DBSession,
    request: Optional[ToggleAdminRequest] = Body(default=None),
) -> UserSummaryResponse:
    command = SetAdminFlagCommand(user_repository=factory.user_repository())
    user = await command.execute(
        user_id,
        is_admin=request.is_admin if request else None,
    )
    await session.commit()

    logger.info(
        "Admin %s set admin flag of %s to %s",
        admin.email,
        user_id,
        user.is_admin,
    )
    return _to_summary(user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted"},
        403: {"description": "Admin access required or deleting yourself"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID,
    http_request: Request,
    admin: AdminPrincipal,
    factory: RepoFactory,
    session: DBSession,
) -> None:
    """Hard-delete a user. Admins cannot delete their own account."""
    decision = authorize(
        admin,
        Role.ADMIN,
        action=Action.DELETE_USER,
        target_id=user_id,
    )
    ensure_allowed(decision, http_request, admin)

    command = DeleteUserCommand(user_repository=factory.user_repository())
    await command.execute(user_id=user_id, requesting_admin_id=admin.subject_id)
    await session.commit()


@router.get(
    "/stats",
    summary="Dashboard statistics",
    responses={403: {"description": "Admin access required"}},
)
async def get_stats(
    _admin: AdminPrincipal,
    factory: RepoFactory,
) -> AdminStatsResponse:
    stats = await AdminStatsQuery.from_factory(factory).execute()
    return AdminStatsResponse.model_validate(stats)
