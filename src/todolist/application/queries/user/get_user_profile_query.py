"""Query for a user's own profile."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from todolist.application.dtos import UserDTO
from todolist.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory


class GetUserProfileQuery:
    """Return a profile, only to the user it belongs to."""

    def __init__(self, user_repository: UserRepository, current_user: UserContext):
        self._user_repo = user_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserProfileQuery:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: UUID | None = None) -> UserDTO:
        target_id = user_id or self._current_user.user_id
        self._current_user.require_self(target_id, "view")

        user = await self._user_repo.find_by_id(target_id)
        if user is None:
            raise UserNotFoundError(target_id)

        return UserDTO.from_user(user)
