"""FastAPI dependency injection for the todo list API.

Long-lived collaborators (engine, session maker, hashing and JWT services)
are built once by ``create_app`` and stored on ``app.state``. Dependencies
here only read them back; nothing is cached at module level.

Provides dependencies for:
- Database sessions
- Authentication (acting identity from the bearer token)
- Repository factory scoped to the acting identity
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.application.context import UserContext
from todolist.application.services import AuthenticationService
from todolist.domain.shared.exceptions import AuthenticationFailedError
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from todolist_auth import JWTService, PasswordHashingService
from todolist_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Authentication service bound to the request's session."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Acting identity (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_user_context(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserContext:
    """
    Resolve the bearer token in the Authorization header to a UserContext.

    Raises
    ------
    AuthenticationFailedError
        401 if the token is missing, invalid, or its user no longer exists
    """
    if credentials is None:
        raise AuthenticationFailedError

    return await auth_service.resolve_identity(credentials.credentials)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: DBSession,
    user_context: CurrentUserContext,
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory for the current user.

    Shares the request session with the authentication service, so a
    router commits everything the request did in one go.
    """
    return SQLAlchemyRepositoryFactory(session=session, user_context=user_context)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_todos(factory: RepoFactory):
#       query = ListTodosQuery.from_factory(factory)  # NOQA: ERA001
