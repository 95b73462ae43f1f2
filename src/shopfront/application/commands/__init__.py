"""Command layer - write operations that mutate state.

Commands represent admin intentions to change system state and
orchestrate domain objects and repositories.

Commands are organized by area:
- admin: user management performed by admins and the superuser
"""

from shopfront.application.commands.admin import (
    CreateUserCommand,
    DeleteUserCommand,
    SetAdminFlagCommand,
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "SetAdminFlagCommand",
    "UpdateUserCommand",
]
