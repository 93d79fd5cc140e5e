"""Unit tests for UserService."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.domain.exceptions import UserNotFoundError
from tasklist.domain.services import UserService
from tasklist.infrastructure.persistence.models import UserModel


@pytest_asyncio.fixture
async def user(db_session: AsyncSession) -> UserModel:
    user = UserModel(email="dora@x.com", password_hash="hash", nick_name="dora")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.mark.asyncio
async def test_get_user(db_session: AsyncSession, user: UserModel):
    found = await UserService(db_session).get_user(user.id)
    assert found.email == "dora@x.com"


@pytest.mark.asyncio
async def test_get_missing_user(db_session: AsyncSession):
    with pytest.raises(UserNotFoundError):
        await UserService(db_session).get_user(999)


@pytest.mark.asyncio
async def test_update_nick_name(db_session: AsyncSession, user: UserModel):
    updated = await UserService(db_session).update_user(user.id, "explorer")

    assert updated.nick_name == "explorer"
    assert updated.email == "dora@x.com"
    assert updated.password_hash == "hash"


@pytest.mark.asyncio
async def test_clear_nick_name(db_session: AsyncSession, user: UserModel):
    updated = await UserService(db_session).update_user(user.id, None)
    assert updated.nick_name is None


@pytest.mark.asyncio
async def test_update_without_nick_name_is_noop(db_session: AsyncSession, user: UserModel):
    updated = await UserService(db_session).update_user(user.id, None, update_nick_name=False)
    assert updated.nick_name == "dora"
