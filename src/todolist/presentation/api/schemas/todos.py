"""Todo schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from todolist.application.dtos import TodoDTO
from todolist.presentation.api.schemas.common import CamelModel


class TodoCreateRequest(CamelModel):
    """Request schema for creating a todo.

    Unknown fields (such as an ``ownerId``) are ignored: the owner is
    always the authenticated user.
    """

    title: str | None = None
    content: str | None = None
    completed: bool | None = None

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "content": "Milk, eggs, bread",
                "completed": False,
            },
        },
    )


class TodoUpdateRequest(CamelModel):
    """Partial update; omitted or null fields stay unchanged.

    An empty ``content`` string clears the content.
    """

    title: str | None = None
    content: str | None = None
    completed: bool | None = None

    model_config = ConfigDict(extra="ignore")


class TodoResponse(CamelModel):
    """Response schema for a todo."""

    id: UUID
    title: str
    content: str | None = Field(default=None)
    completed: bool
    owner_id: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: TodoDTO) -> "TodoResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            content=dto.content,
            completed=dto.completed,
            owner_id=dto.owner_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
