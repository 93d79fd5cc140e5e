"""Integration tests for the profile endpoints."""

import pytest
from httpx import AsyncClient


def _headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_get_profile(client: AsyncClient):
    await client.post(
        "/auth/signup",
        json={"email": "frank@x.com", "password": "password1", "nickName": "frank"},
    )
    token = (
        await client.post("/auth/login", json={"email": "frank@x.com", "password": "password1"})
    ).json()["accessToken"]

    res = await client.get("/user", headers=_headers(token))

    assert res.status_code == 200
    data = res.json()
    assert data["email"] == "frank@x.com"
    assert data["nickName"] == "frank"
    assert set(data) == {"id", "email", "nickName", "createdAt", "updatedAt"}


@pytest.mark.asyncio
async def test_profile_never_exposes_password(client: AsyncClient, register_and_login):
    token = await register_and_login("grace@x.com", "supersecret")

    res = await client.get("/user", headers=_headers(token))

    body = res.text
    assert "passwordHash" not in body
    assert "password_hash" not in body
    assert "supersecret" not in body
    assert "$argon2" not in body


@pytest.mark.asyncio
async def test_update_nick_name(client: AsyncClient, register_and_login):
    token = await register_and_login("heidi@x.com")

    res = await client.patch("/user", json={"nickName": "heidi"}, headers=_headers(token))

    assert res.status_code == 200
    assert res.json()["nickName"] == "heidi"
    assert (await client.get("/user", headers=_headers(token))).json()["nickName"] == "heidi"


@pytest.mark.asyncio
async def test_update_with_empty_body_changes_nothing(client: AsyncClient, register_and_login):
    token = await register_and_login("ivan@x.com")
    await client.patch("/user", json={"nickName": "ivan"}, headers=_headers(token))

    res = await client.patch("/user", json={}, headers=_headers(token))

    assert res.status_code == 200
    assert res.json()["nickName"] == "ivan"


@pytest.mark.asyncio
async def test_update_cannot_change_email(client: AsyncClient, register_and_login):
    token = await register_and_login("judy@x.com")

    res = await client.patch(
        "/user", json={"email": "mallory@x.com", "nickName": "judy"}, headers=_headers(token)
    )

    assert res.status_code == 200
    assert res.json()["email"] == "judy@x.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["GET", "PATCH"])
async def test_profile_requires_token(client: AsyncClient, method: str):
    res = await client.request(method, "/user", json={"nickName": "x"})
    assert res.status_code == 401
