"""List the acting user's todos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from todolist.application.dtos import TodoDTO
from todolist.domain.todo import TodoRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory


class ListTodosQuery:
    """All todos owned by the current user, newest first."""

    def __init__(self, todo_repository: TodoRepository, current_user: UserContext):
        self._todo_repo = todo_repository
        self._owner_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListTodosQuery:
        return cls(
            todo_repository=factory.todo_repository(),
            current_user=factory.current_user,
        )

    async def execute(self) -> list[TodoDTO]:
        todos = await self._todo_repo.list_by_owner(self._owner_id)
        return [TodoDTO.from_todo(todo) for todo in todos]
