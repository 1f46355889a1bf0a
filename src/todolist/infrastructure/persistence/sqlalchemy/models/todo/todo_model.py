"""SQLAlchemy model for Todo entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todolist.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

if TYPE_CHECKING:
    from todolist.infrastructure.persistence.sqlalchemy.models.user import UserModel


class TodoModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting todos.

    Table: todos
    """

    __tablename__ = "todos"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    owner: Mapped[UserModel] = relationship(back_populates="todos")

    def __repr__(self) -> str:
        return f"<TodoModel(id={self.id}, owner_id={self.owner_id})>"
