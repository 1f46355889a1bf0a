"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from todolist.domain.user import NotOwnProfileError

if TYPE_CHECKING:
    from todolist.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Created once per request from the verified bearer token and handed
    explicitly to every command and query that needs authorization.
    """

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_values(cls, user_id: UUID, email: str) -> UserContext:
        return cls(user_id=user_id, email=email)

    def require_self(self, user_id: UUID, action: str) -> None:
        """Raise NotOwnProfileError unless ``user_id`` is the acting user."""
        if user_id != self.user_id:
            raise NotOwnProfileError(action)

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return f"UserContext(user_id={self.user_id}, email={self.email!r})"
