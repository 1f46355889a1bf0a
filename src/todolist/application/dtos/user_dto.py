"""DTOs for user accounts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from todolist.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """User as seen outside the application layer (no password hash)."""

    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class LoginResultDTO:
    """Successful authentication: the user and a bearer token."""

    user: UserDTO
    access_token: str
    expires_in: int  # seconds
