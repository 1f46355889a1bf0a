from todolist.application.commands.user.change_email_command import (
    ChangeEmailCommand,
)
from todolist.application.commands.user.change_password_command import (
    ChangePasswordCommand,
)
from todolist.application.commands.user.delete_user_command import DeleteUserCommand
from todolist.application.commands.user.update_user_command import UpdateUserCommand

__all__ = [
    "ChangeEmailCommand",
    "ChangePasswordCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
