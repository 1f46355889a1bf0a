"""Commands (write operations) of the application layer."""

from todolist.application.commands.todo import (
    CreateTodoCommand,
    DeleteTodoCommand,
    UpdateTodoCommand,
)
from todolist.application.commands.user import (
    ChangeEmailCommand,
    ChangePasswordCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "ChangeEmailCommand",
    "ChangePasswordCommand",
    "CreateTodoCommand",
    "DeleteTodoCommand",
    "DeleteUserCommand",
    "UpdateTodoCommand",
    "UpdateUserCommand",
]
