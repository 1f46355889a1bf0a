"""Change email with current-password verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from todolist.application.dtos import UserDTO
from todolist.domain.user import (
    Email,
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    UserNotFoundError,
    UserRepository,
)
from todolist_auth import PasswordHashingService

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ChangeEmailCommand:
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
    ) -> ChangeEmailCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            current_user=factory.current_user,
        )

    async def execute(
        self,
        user_id: UUID,
        new_email: str,
        current_password: str,
    ) -> UserDTO:
        self._current_user.require_self(user_id, "update")
        email = Email(new_email)

        existing = await self._user_repo.find_by_email(email)
        if existing is not None and existing.id != user_id:
            raise EmailAlreadyExistsError(email.value)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            raise IncorrectPasswordError

        user.change_email(email)
        updated = await self._user_repo.update(user)
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info("Email changed for user: %s", user_id)
        return UserDTO.from_user(updated)
