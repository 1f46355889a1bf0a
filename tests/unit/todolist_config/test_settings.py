"""Unit tests for application settings."""

import pytest
from pydantic import SecretStr, ValidationError

from todolist_config import Settings, get_settings


def _settings(**overrides) -> Settings:
    values = {"jwt_secret_key": SecretStr("secret")}
    values.update(overrides)
    return Settings(**values)


class TestSettings:
    def test_database_url_wins(self):
        settings = _settings(database_url="sqlite+aiosqlite:///./x.db")

        assert settings.sqlalchemy_url == "sqlite+aiosqlite:///./x.db"

    def test_postgres_url_built_from_components(self):
        settings = _settings(
            database_url=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="todo",
            postgres_password=SecretStr("pw"),
            postgres_db="todos",
        )

        assert settings.sqlalchemy_url == "postgresql+asyncpg://todo:pw@db:5433/todos"

    def test_cors_origins_parsed(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_cors_origins_accepts_list(self):
        settings = _settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_is_production(self):
        assert _settings(environment="production").is_production
        assert not _settings(environment="development").is_production

    def test_debug_does_not_enable_sql_echo(self):
        assert _settings(api_debug=True).db_echo is False

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            _settings(environment="staging")

    def test_get_settings_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-env")
        monkeypatch.setenv("API_PORT", "4000")

        settings = get_settings()

        assert settings.jwt_secret_key.get_secret_value() == "from-env"
        assert settings.api_port == 4000
        assert get_settings() is settings
