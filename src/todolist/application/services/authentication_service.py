"""Authentication service for registration, login and identity resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todolist.application.context import UserContext
from todolist.application.dtos import LoginResultDTO, UserDTO
from todolist.domain.shared.exceptions import (
    AuthenticationFailedError,
    ErrorCode,
    InvalidInputError,
)
from todolist.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    User,
    UserName,
    validate_password,
)
from todolist_auth import InvalidTokenError, JWTService, PasswordHashingService

if TYPE_CHECKING:
    from todolist.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates todolist_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password
    - Resolving a bearer token to the acting identity
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        email: str | None,
        password: str | None,
        name: str | None,
    ) -> UserDTO:
        if not email or not password or not name:
            msg = "Email, password, and name are required."
            raise InvalidInputError(msg)

        email_obj = Email(email)
        validate_password(password)
        user_name = UserName(name)

        existing_user = await self._user_repo.find_by_email(email_obj)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = self._password_service.hash(password)
        user = User.create(email_obj, user_name, password_hash)
        created = await self._user_repo.create(user)

        logger.info("User registered: %s", created.email)
        return UserDTO.from_user(created)

    async def login(self, email: str | None, password: str | None) -> LoginResultDTO:
        if not email or not password:
            msg = "Email and password are required."
            raise InvalidInputError(msg)

        email_obj = Email(email)

        user = await self._user_repo.find_by_email(email_obj)
        if user is None:
            self._password_service.verify_dummy(password)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Failed login for: %s", email_obj.value)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            user.set_password_hash(self._password_service.hash(password))
            await self._user_repo.update(user)
            logger.debug("Password hash upgraded for user: %s", user.id)

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

        logger.info("User logged in: %s", user.email)
        return LoginResultDTO(
            user=UserDTO.from_user(user),
            access_token=access_token,
            expires_in=int(self._jwt_service.access_token_lifetime.total_seconds()),
        )

    async def resolve_identity(self, token: str) -> UserContext:
        """Verify a bearer token and return the acting identity.

        Raises
        ------
        AuthenticationFailedError
            If the token is invalid or expired, or its user no longer exists
        """
        try:
            payload = self._jwt_service.verify_token(token)
        except InvalidTokenError as e:
            logger.warning("Invalid token: %s", e)
            msg = "Invalid or expired token"
            raise AuthenticationFailedError(msg, ErrorCode.INVALID_TOKEN) from e

        if not payload.is_access_token():
            msg = "Invalid token type"
            raise AuthenticationFailedError(msg, ErrorCode.INVALID_TOKEN)

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            logger.warning("User not found for token: %s", payload.user_id)
            msg = "User not found"
            raise AuthenticationFailedError(msg, ErrorCode.INVALID_TOKEN)

        return UserContext.create(user)
