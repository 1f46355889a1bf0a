"""Todo domain exceptions."""

from uuid import UUID

from todolist.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    InvalidInputError,
)


class InvalidTodoError(InvalidInputError):
    """Title or content violates the todo field rules."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_TODO)


class TodoNotFoundError(EntityNotFoundError):
    """Todo absent, or owned by someone else.

    Both cases are reported identically so that a caller cannot learn
    whether another user's todo exists.
    """

    def __init__(self, todo_id: UUID, action: str = "view") -> None:
        self.todo_id = todo_id
        super().__init__(
            f"Todo not found or you do not have permission to {action} this todo.",
            ErrorCode.TODO_NOT_FOUND,
            {"todo_id": str(todo_id)},
        )
