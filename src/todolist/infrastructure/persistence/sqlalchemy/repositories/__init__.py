"""SQLAlchemy repository implementations."""

from todolist.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.todo import (
    TodoRepositorySQLAlchemy,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "TodoRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
