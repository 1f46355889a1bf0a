"""Change password with current-password verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from todolist.domain.user import (
    IncorrectPasswordError,
    UserNotFoundError,
    UserRepository,
    validate_password,
)
from todolist_auth import PasswordHashingService

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    """A stolen token alone is not enough: the current password is required."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        current_user: UserContext,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._current_user = current_user

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> ChangePasswordCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            current_user=factory.current_user,
        )

    async def execute(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> str:
        self._current_user.require_self(user_id, "update")
        validate_password(new_password)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            raise IncorrectPasswordError

        user.set_password_hash(self._password_service.hash(new_password))
        if await self._user_repo.update(user) is None:
            raise UserNotFoundError(user_id)

        logger.info("Password changed for user: %s", user_id)
        return "Password updated successfully."
