"""SQLAlchemy implementation of TodoRepository.

Every statement filters on ``owner_id``; there is no unscoped lookup.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.domain.shared.exceptions import RecordVanishedError
from todolist.domain.shared.time import ensure_tz_aware
from todolist.domain.todo import Todo, TodoRepository
from todolist.infrastructure.persistence.sqlalchemy.models.todo import TodoModel

logger = logging.getLogger(__name__)


class TodoRepositorySQLAlchemy(TodoRepository):
    """SQLAlchemy implementation of the TodoRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, todo: Todo) -> Todo:
        model = self._map_to_model(todo)
        self._session.add(model)
        await self._session.flush()

        logger.debug("Created todo: %s (owner %s)", todo.id, todo.owner_id)
        return self._map_to_domain(model)

    async def list_by_owner(self, owner_id: UUID) -> list[Todo]:
        stmt = (
            select(TodoModel)
            .where(TodoModel.owner_id == owner_id)
            .order_by(TodoModel.created_at.desc(), TodoModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_scoped(self, todo_id: UUID, owner_id: UUID) -> Optional[Todo]:
        model = await self._find_model_scoped(todo_id, owner_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def update_scoped(self, todo: Todo) -> Todo:
        model = await self._find_model_scoped(todo.id, todo.owner_id)
        if model is None:
            raise RecordVanishedError("Todo", todo.id)

        model.title = todo.title
        model.content = todo.content
        model.completed = todo.completed
        model.updated_at = todo.updated_at
        await self._session.flush()

        logger.debug("Updated todo: %s", todo.id)
        return self._map_to_domain(model)

    async def delete_scoped(self, todo_id: UUID, owner_id: UUID) -> Todo:
        model = await self._find_model_scoped(todo_id, owner_id)
        if model is None:
            raise RecordVanishedError("Todo", todo_id)

        deleted = self._map_to_domain(model)
        await self._session.delete(model)
        await self._session.flush()

        logger.debug("Deleted todo: %s", todo_id)
        return deleted

    async def _find_model_scoped(
        self,
        todo_id: UUID,
        owner_id: UUID,
    ) -> Optional[TodoModel]:
        stmt = select(TodoModel).where(
            TodoModel.id == todo_id,
            TodoModel.owner_id == owner_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TodoModel) -> Todo:
        return Todo.reconstitute(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            content=model.content,
            completed=model.completed,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, todo: Todo) -> TodoModel:
        return TodoModel(
            id=todo.id,
            owner_id=todo.owner_id,
            title=todo.title,
            content=todo.content,
            completed=todo.completed,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )
