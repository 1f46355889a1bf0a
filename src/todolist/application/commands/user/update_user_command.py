"""Update a user's own profile (email, name and/or password)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from todolist.application.dtos import UserDTO
from todolist.domain.user import (
    Email,
    EmailAlreadyExistsError,
    UserName,
    UserNotFoundError,
    UserRepository,
    validate_password,
)
from todolist_auth import PasswordHashingService

if TYPE_CHECKING:
    from todolist.application.context import UserContext
    from todolist.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Validate and apply profile changes for the current user."""

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
    ) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
            current_user=factory.current_user,
        )

    async def execute(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> UserDTO:
        self._current_user.require_self(user_id, "update")

        # Validate every supplied field before touching the aggregate
        new_email = Email(email) if email is not None else None
        new_name = UserName(name) if name is not None else None
        if password is not None:
            validate_password(password)

        if new_email is not None:
            existing = await self._user_repo.find_by_email(new_email)
            if existing is not None and existing.id != user_id:
                raise EmailAlreadyExistsError(new_email.value)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if new_email is not None:
            user.change_email(new_email)
        if new_name is not None:
            user.rename(new_name)
        if password is not None:
            user.set_password_hash(self._password_service.hash(password))

        updated = await self._user_repo.update(user)
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info("Profile updated for user: %s", user_id)
        return UserDTO.from_user(updated)
