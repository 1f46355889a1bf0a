"""Todo entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from todolist.domain.shared.time import utc_now
from todolist.domain.todo.exceptions import InvalidTodoError

MAX_TITLE_LENGTH = 255
MAX_CONTENT_LENGTH = 1000


def _validate_title(title: Optional[str]) -> str:
    trimmed = (title or "").strip()
    if not trimmed:
        msg = "Title is required."
        raise InvalidTodoError(msg)
    if len(trimmed) > MAX_TITLE_LENGTH:
        msg = f"Title must be {MAX_TITLE_LENGTH} characters or less."
        raise InvalidTodoError(msg)
    return trimmed


def _validate_content(content: Optional[str]) -> Optional[str]:
    if not content:
        return None
    if len(content) > MAX_CONTENT_LENGTH:
        msg = f"Content must be {MAX_CONTENT_LENGTH} characters or less."
        raise InvalidTodoError(msg)
    return content


class Todo:
    """A todo item owned by exactly one user.

    The owner is fixed at creation time; there is no way to reassign it.
    """

    def __init__(  # NOQA: PLR0913
        self,
        owner_id: UUID,
        title: str,
        content: Optional[str] = None,
        completed: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._owner_id = owner_id
        self._title = _validate_title(title)
        self._content = _validate_content(content)
        self._completed = completed
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> Optional[str]:
        return self._content

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_changes(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves a field untouched.

        All fields are validated before any of them is assigned.
        """
        new_title = _validate_title(title) if title is not None else self._title
        new_content = (
            _validate_content(content) if content is not None else self._content
        )

        self._title = new_title
        self._content = new_content
        if completed is not None:
            self._completed = completed
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        title: str,
        content: Optional[str] = None,
        completed: bool = False,
    ) -> "Todo":
        return cls(
            owner_id=owner_id,
            title=title,
            content=content,
            completed=completed,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        owner_id: UUID,
        title: str,
        content: Optional[str],
        completed: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Todo":
        return cls(
            id=id,
            owner_id=owner_id,
            title=title,
            content=content,
            completed=completed,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Todo):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Todo(id={self._id}, owner_id={self._owner_id}, title={self._title!r})"
