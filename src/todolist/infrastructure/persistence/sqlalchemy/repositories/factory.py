"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from todolist.infrastructure.persistence.sqlalchemy.repositories.todo import (
    TodoRepositorySQLAlchemy,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from todolist.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._user_context = user_context

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._todo_repo: TodoRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> UserContext:
        return self._user_context

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def todo_repository(self) -> TodoRepositorySQLAlchemy:
        if self._todo_repo is None:
            self._todo_repo = TodoRepositorySQLAlchemy(self._session)
        return self._todo_repo
