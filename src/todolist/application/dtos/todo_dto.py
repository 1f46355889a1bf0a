"""DTO for todo items."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from todolist.domain.todo import Todo


@dataclass(frozen=True)
class TodoDTO:
    id: UUID
    title: str
    content: Optional[str]
    completed: bool
    owner_id: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_todo(cls, todo: Todo) -> "TodoDTO":
        return cls(
            id=todo.id,
            title=todo.title,
            content=todo.content,
            completed=todo.completed,
            owner_id=todo.owner_id,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )
