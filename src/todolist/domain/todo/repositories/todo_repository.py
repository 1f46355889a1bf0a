"""Todo repository interface.

Every read-by-id and every write is scoped by both the todo id and the
owner id, so an implementation cannot touch another owner's row.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from todolist.domain.todo.entities import Todo


class TodoRepository(ABC):
    """Repository interface for Todo entities."""

    @abstractmethod
    async def create(self, todo: Todo) -> Todo:
        """Persist a new todo."""

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> list[Todo]:
        """All todos of an owner, newest first."""

    @abstractmethod
    async def find_scoped(self, todo_id: UUID, owner_id: UUID) -> Optional[Todo]:
        """Find a todo by id, only if it belongs to the owner."""

    @abstractmethod
    async def update_scoped(self, todo: Todo) -> Todo:
        """Write back a todo, matching on (todo.id, todo.owner_id).

        Raises RecordVanishedError if no row matches.
        """

    @abstractmethod
    async def delete_scoped(self, todo_id: UUID, owner_id: UUID) -> Todo:
        """Delete a todo matching (todo_id, owner_id) and return it.

        Raises RecordVanishedError if no row matches.
        """
