"""Delete one of the acting user's todos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from todolist.application.dtos import TodoDTO
from todolist.domain.todo import TodoNotFoundError, TodoRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteTodoCommand:
    def __init__(self, todo_repository: TodoRepository, current_user: UserContext):
        self._todo_repo = todo_repository
        self._owner_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteTodoCommand:
        return cls(
            todo_repository=factory.todo_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, todo_id: UUID) -> TodoDTO:
        """Delete the todo and return it as it was just before deletion."""
        if await self._todo_repo.find_scoped(todo_id, self._owner_id) is None:
            raise TodoNotFoundError(todo_id, "delete")

        deleted = await self._todo_repo.delete_scoped(todo_id, self._owner_id)

        logger.info("Todo deleted: %s", todo_id)
        return TodoDTO.from_todo(deleted)
