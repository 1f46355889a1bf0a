"""Partially update one of the acting user's todos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from todolist.application.dtos import TodoDTO
from todolist.domain.todo import TodoNotFoundError, TodoRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateTodoCommand:
    def __init__(self, todo_repository: TodoRepository, current_user: UserContext):
        self._todo_repo = todo_repository
        self._owner_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateTodoCommand:
        return cls(
            todo_repository=factory.todo_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        todo_id: UUID,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> TodoDTO:
        todo = await self._todo_repo.find_scoped(todo_id, self._owner_id)
        if todo is None:
            raise TodoNotFoundError(todo_id, "update")

        todo.apply_changes(title=title, content=content, completed=completed)
        updated = await self._todo_repo.update_scoped(todo)

        logger.info("Todo updated: %s", todo_id)
        return TodoDTO.from_todo(updated)
