"""Create a todo owned by the acting user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from todolist.application.dtos import TodoDTO
from todolist.domain.todo import Todo, TodoRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateTodoCommand:
    """Create a new todo.

    The owner is always the acting user; any owner supplied by the client
    never reaches this command.
    """

    def __init__(self, todo_repository: TodoRepository, current_user: UserContext):
        self._todo_repo = todo_repository
        self._owner_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateTodoCommand:
        return cls(
            todo_repository=factory.todo_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        title: Optional[str],
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> TodoDTO:
        todo = Todo.create(
            owner_id=self._owner_id,
            title=title,
            content=content,
            completed=bool(completed),
        )
        created = await self._todo_repo.create(todo)

        logger.info("Todo created: %s (owner %s)", created.id, self._owner_id)
        return TodoDTO.from_todo(created)
