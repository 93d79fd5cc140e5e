"""Unit tests for application settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from tasklist.core.config import DEFAULT_SECRET_KEY, AuthConfig, Settings


def test_auth_config_is_derived_from_settings():
    settings = Settings(
        environment="testing",
        secret_key="abc",
        jwt_algorithm="HS512",
        access_token_expire_minutes=15,
        password_hash_time_cost=2,
        password_hash_memory_cost=4096,
        password_hash_parallelism=2,
    )

    config = settings.auth_config()

    assert config == AuthConfig(
        secret_key="abc",
        algorithm="HS512",
        issuer="tasklist",
        access_token_ttl=timedelta(minutes=15),
        hash_time_cost=2,
        hash_memory_cost=4096,
        hash_parallelism=2,
    )


def test_auth_config_is_immutable():
    config = Settings(environment="testing").auth_config()

    with pytest.raises(AttributeError):
        config.secret_key = "other"  # type: ignore[misc]


def test_settings_are_frozen():
    settings = Settings(environment="testing")

    with pytest.raises(ValidationError):
        settings.secret_key = "other"  # type: ignore[misc]


def test_production_rejects_default_secret():
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(environment="production", secret_key=DEFAULT_SECRET_KEY)


def test_production_accepts_real_secret():
    settings = Settings(environment="production", secret_key="a-real-secret")
    assert settings.is_production


def test_token_lifetime_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(environment="testing", access_token_expire_minutes=0)


def test_cors_origins_from_comma_separated_string():
    settings = Settings(
        environment="testing",
        cors_origins="http://a.example, http://b.example,",
    )
    assert settings.cors_origins == ["http://a.example", "http://b.example"]


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError, match="SQLite does not support multiple worker"):
        Settings(environment="testing", database_url="sqlite+aiosqlite:///./x.db", workers=4)


def test_postgres_allows_multiple_workers():
    settings = Settings(
        environment="testing",
        database_url="postgresql+asyncpg://u:p@localhost/tasklist",
        workers=4,
    )
    assert settings.workers == 4


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TASKLIST_SECRET_KEY", "from-env")
    monkeypatch.setenv("TASKLIST_ACCESS_TOKEN_EXPIRE_MINUTES", "5")

    settings = Settings(environment="testing")

    assert settings.secret_key == "from-env"
    assert settings.auth_config().access_token_ttl == timedelta(minutes=5)
