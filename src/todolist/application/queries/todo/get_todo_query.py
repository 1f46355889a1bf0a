"""Fetch a single todo of the acting user."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from todolist.application.dtos import TodoDTO
from todolist.domain.todo import TodoNotFoundError, TodoRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory


class GetTodoQuery:
    def __init__(self, todo_repository: TodoRepository, current_user: UserContext):
        self._todo_repo = todo_repository
        self._owner_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetTodoQuery:
        return cls(
            todo_repository=factory.todo_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, todo_id: UUID) -> TodoDTO:
        todo = await self._todo_repo.find_scoped(todo_id, self._owner_id)
        if todo is None:
            raise TodoNotFoundError(todo_id, "view")
        return TodoDTO.from_todo(todo)
