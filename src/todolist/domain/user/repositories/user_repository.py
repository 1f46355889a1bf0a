"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from todolist.domain.user.aggregates import User
from todolist.domain.user.value_objects import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises EmailAlreadyExistsError when the store's unique email
        constraint rejects the insert.
        """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        """Persist changes to an existing user; None if the row is gone."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> Optional[User]:
        """Delete a user (and, through the store, their todos).

        Returns the deleted user, or None if no row matched.
        """
