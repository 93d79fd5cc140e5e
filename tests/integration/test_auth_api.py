"""Integration tests for the sign-up and login endpoints."""

import pytest
from fastapi import FastAPI
from httpx import AsyncClient
from sqlalchemy import func, select

from tasklist.infrastructure.persistence.models import UserModel


@pytest.mark.asyncio
async def test_signup_success(client: AsyncClient, app: FastAPI):
    res = await client.post(
        "/auth/signup",
        json={"email": "alice@x.com", "password": "password1", "nickName": "alice"},
    )

    assert res.status_code == 201
    assert res.json() == {"message": "ok"}

    async with app.state.db.session() as session:
        user = (
            await session.execute(select(UserModel).where(UserModel.email == "alice@x.com"))
        ).scalar_one()
    assert user.nick_name == "alice"
    assert user.password_hash != "password1"


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient, app: FastAPI):
    payload = {"email": "dup@x.com", "password": "password1"}
    assert (await client.post("/auth/signup", json=payload)).status_code == 201

    res = await client.post("/auth/signup", json={"email": "dup@x.com", "password": "other-pass"})

    assert res.status_code == 409
    assert res.json()["error"] == "Conflict"

    async with app.state.db.session() as session:
        count = await session.scalar(
            select(func.count()).select_from(UserModel).where(UserModel.email == "dup@x.com")
        )
    assert count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"email": "not-an-email", "password": "password1"},
        {"email": "short@x.com", "password": "1234"},
        {"email": "missing-password@x.com"},
        {"password": "password1"},
    ],
)
async def test_signup_validation_errors(client: AsyncClient, payload: dict):
    res = await client.post("/auth/signup", json=payload)

    assert res.status_code == 400
    data = res.json()
    assert data["error"] == "Validation error"
    assert data["details"]


@pytest.mark.asyncio
async def test_signup_reports_offending_field(client: AsyncClient):
    res = await client.post("/auth/signup", json={"email": "short@x.com", "password": "1234"})

    fields = [detail["field"] for detail in res.json()["details"]]
    assert fields == ["password"]


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient):
    await client.post("/auth/signup", json={"email": "bob@x.com", "password": "password1"})

    res = await client.post("/auth/login", json={"email": "bob@x.com", "password": "password1"})

    assert res.status_code == 200
    data = res.json()
    assert set(data) == {"accessToken"}
    assert data["accessToken"].count(".") == 2


@pytest.mark.asyncio
async def test_login_token_identifies_user(client: AsyncClient):
    await client.post("/auth/signup", json={"email": "carol@x.com", "password": "password1"})
    res = await client.post("/auth/login", json={"email": "carol@x.com", "password": "password1"})
    token = res.json()["accessToken"]

    me = await client.get("/user", headers={"Authorization": f"Bearer {token}"})

    assert me.status_code == 200
    assert me.json()["email"] == "carol@x.com"


@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_email_look_the_same(client: AsyncClient):
    await client.post("/auth/signup", json={"email": "dave@x.com", "password": "password1"})

    wrong_password = await client.post(
        "/auth/login", json={"email": "dave@x.com", "password": "password2"}
    )
    unknown_email = await client.post(
        "/auth/login", json={"email": "nobody@x.com", "password": "password1"}
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["message"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_validation_error(client: AsyncClient):
    res = await client.post("/auth/login", json={"email": "bad", "password": "password1"})
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_each_login_issues_a_usable_token(client: AsyncClient):
    await client.post("/auth/signup", json={"email": "erin@x.com", "password": "password1"})

    for _ in range(2):
        res = await client.post(
            "/auth/login", json={"email": "erin@x.com", "password": "password1"}
        )
        token = res.json()["accessToken"]
        me = await client.get("/user", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200


@pytest.mark.asyncio
async def test_email_is_stored_and_matched_exactly_as_sent(client: AsyncClient, app: FastAPI):
    first = await client.post("/auth/signup", json={"email": "alice@X.com", "password": "password1"})
    second = await client.post("/auth/signup", json={"email": "alice@x.com", "password": "password1"})

    assert first.status_code == 201
    assert second.status_code == 201

    async with app.state.db.session() as session:
        emails = (await session.execute(select(UserModel.email).order_by(UserModel.id))).scalars().all()
    assert emails == ["alice@X.com", "alice@x.com"]

    other_case = await client.post(
        "/auth/login", json={"email": "alice@X.COM", "password": "password1"}
    )
    assert other_case.status_code == 401

    exact = await client.post("/auth/login", json={"email": "alice@X.com", "password": "password1"})
    assert exact.status_code == 200
