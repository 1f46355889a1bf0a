"""Fixtures for SQLAlchemy repository tests on in-memory SQLite."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from todolist.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    TodoRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)


@pytest_asyncio.fixture
async def session():
    """Create an in-memory SQLite session for testing."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(engine)

    async with create_session_maker(engine)() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


@pytest.fixture
def todo_repo(session: AsyncSession) -> TodoRepositorySQLAlchemy:
    return TodoRepositorySQLAlchemy(session)
