"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from todolist.domain.todo import TodoRepository
from todolist.domain.user import UserRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one request."""

    @property
    def current_user(self) -> UserContext:
        """Get the acting identity of the request."""
        ...

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def todo_repository(self) -> TodoRepository:
        """Get todo repository."""
        ...
