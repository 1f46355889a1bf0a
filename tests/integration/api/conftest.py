"""Pytest fixtures for API integration tests.

Each test gets its own app instance over a fresh SQLite file. The client is
used as a context manager so the app lifespan creates the schema.
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from todolist.presentation.api.app import create_app
from todolist_config.settings import Settings

DEFAULT_PASSWORD = "password1"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        environment="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        api_debug=True,
        api_cors_origins="http://localhost:5173",
        password_hash_rounds=4,  # Low rounds for fast tests
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client with a temporary database."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register_user(test_client) -> Callable[..., dict]:
    """Register a user and return the response data."""

    def _register(
        email: str,
        password: str = DEFAULT_PASSWORD,
        name: str = "Test User",
    ) -> dict:
        response = test_client.post(
            "/users/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _register


@pytest.fixture
def login(test_client) -> Callable[..., dict[str, str]]:
    """Log in and return Authorization headers."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = test_client.post(
            "/users/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}

    return _login


@pytest.fixture
def alice(register_user, login) -> tuple[dict, dict[str, str]]:
    """A registered and logged-in user: (user data, auth headers)."""
    user = register_user("alice@example.com", name="Alice")
    return user, login("alice@example.com")


@pytest.fixture
def bob(register_user, login) -> tuple[dict, dict[str, str]]:
    user = register_user("bob@example.com", name="Bob")
    return user, login("bob@example.com")
