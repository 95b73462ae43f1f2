from shopfront.application.commands.admin.create_user_command import CreateUserCommand
from shopfront.application.commands.admin.delete_user_command import DeleteUserCommand
from shopfront.application.commands.admin.set_admin_flag_command import (
    SetAdminFlagCommand,
)
from shopfront.application.commands.admin.update_user_command import (
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "SetAdminFlagCommand",
    "UpdateUserCommand",
]
