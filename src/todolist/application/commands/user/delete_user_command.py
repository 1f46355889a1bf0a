"""Delete the acting user's account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from todolist.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Delete an account; the store cascades the delete to its todos."""

    def __init__(self, user_repository: UserRepository, current_user: UserContext):
        self._user_repo = user_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, user_id: UUID) -> str:
        self._current_user.require_self(user_id, "delete")

        if await self._user_repo.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        if await self._user_repo.delete(user_id) is None:
            raise UserNotFoundError(user_id)

        logger.info("User deleted: %s", user_id)
        return "User deleted successfully."
