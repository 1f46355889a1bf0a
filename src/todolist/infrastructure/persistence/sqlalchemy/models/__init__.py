"""SQLAlchemy models for persistence layer."""

from todolist.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from todolist.infrastructure.persistence.sqlalchemy.models.todo import TodoModel
from todolist.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = ["Base", "TimestampMixin", "TodoModel", "UserModel"]
