"""Pytest configuration for all tests."""

from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.config import AuthConfig, Settings
from tasklist.infrastructure.api.app import create_app
from tasklist.infrastructure.auth import JWTService, PasswordHasher
from tasklist.infrastructure.persistence.database import DatabaseManager

TEST_SECRET_KEY = "test-secret-key-for-tasklist-suite"


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory database and cheap password hashing."""
    return Settings(
        environment="testing",
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=TEST_SECRET_KEY,
        access_token_expire_minutes=60,
        password_hash_time_cost=1,
        password_hash_memory_cost=1024,
        password_hash_parallelism=1,
        log_level="WARNING",
        log_format="json",
    )


@pytest.fixture
def auth_config(settings: Settings) -> AuthConfig:
    return settings.auth_config()


@pytest.fixture
def jwt_service(auth_config: AuthConfig) -> JWTService:
    return JWTService(auth_config)


@pytest.fixture
def password_hasher(auth_config: AuthConfig) -> PasswordHasher:
    return PasswordHasher(auth_config)


@pytest_asyncio.fixture
async def db(settings: Settings) -> AsyncGenerator[DatabaseManager, None]:
    """Database manager over a fresh in-memory SQLite database."""
    manager = DatabaseManager(settings)
    await manager.create_tables()
    yield manager
    await manager.drop_tables()
    await manager.disconnect()


@pytest_asyncio.fixture
async def db_session(db: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with db.session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Application wired to its own in-memory database.

    ASGITransport does not run the lifespan, so tables are created here.
    """
    application = create_app(settings)
    await application.state.db.create_tables()
    yield application
    await application.state.db.drop_tables()
    await application.state.db.disconnect()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def register_and_login(client: AsyncClient) -> Callable[[str, str], Awaitable[str]]:
    """Return a helper that signs a user up, logs in and returns the token."""

    async def _register_and_login(email: str, password: str = "password1") -> str:
        res = await client.post("/auth/signup", json={"email": email, "password": password})
        assert res.status_code == 201, res.text
        res = await client.post("/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return res.json()["accessToken"]

    return _register_and_login
