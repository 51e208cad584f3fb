"""End-to-end tests for registration, login and bearer-token checks."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from blog_api.config import get_settings
from blog_api.infrastructure.database import UserModel
from blog_api.infrastructure.security import JWTTokenService

CREDENTIALS = {"username": "alice", "email": "alice@example.com", "password": "secret-password"}


@pytest.mark.asyncio
async def test_register_returns_public_user(client: AsyncClient):
    response = await client.post("/api/auth/register", json=CREDENTIALS)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered"
    assert data["user"]["username"] == "alice"
    assert data["user"]["email"] == "alice@example.com"
    assert isinstance(data["user"]["id"], int)
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


@pytest.mark.asyncio
async def test_register_stores_only_a_hash(client: AsyncClient, session_factory):
    await client.post("/api/auth/register", json=CREDENTIALS)

    async with session_factory() as session:
        stored = (await session.execute(select(UserModel.password_hash))).scalar_one()

    assert stored != CREDENTIALS["password"]
    assert stored.startswith("$2")


@pytest.mark.asyncio
async def test_register_twice_with_same_email_conflicts(client: AsyncClient, session_factory):
    first = await client.post("/api/auth/register", json=CREDENTIALS)
    second = await client.post(
        "/api/auth/register", json={**CREDENTIALS, "username": "someone-else"}
    )

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["message"] == "User with this email or username already exists"

    async with session_factory() as session:
        count = (await session.execute(select(func.count()).select_from(UserModel))).scalar_one()
    assert count == 1


@pytest.mark.asyncio
async def test_register_with_taken_username_uses_same_message(client: AsyncClient):
    await client.post("/api/auth/register", json=CREDENTIALS)

    response = await client.post(
        "/api/auth/register", json={**CREDENTIALS, "email": "other@example.com"}
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User with this email or username already exists"


@pytest.mark.asyncio
async def test_register_rejects_invalid_input(client: AsyncClient):
    response = await client.post(
        "/api/auth/register", json={"username": "", "email": "not-an-email", "password": "pw"}
    )

    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert fields == {"body.username", "body.email", "body.password"}


@pytest.mark.asyncio
async def test_login_returns_token_for_valid_credentials(client: AsyncClient):
    registered = (await client.post("/api/auth/register", json=CREDENTIALS)).json()

    response = await client.post(
        "/api/auth/login",
        json={"email": CREDENTIALS["email"], "password": CREDENTIALS["password"]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"] == registered["user"]
    assert JWTTokenService(get_settings().jwt_secret).verify(data["token"]) == registered["user"]["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("app_env", ["development", "production"])
async def test_unknown_email_and_wrong_password_are_indistinguishable(make_client, app_env: str):
    client = make_client(get_settings().model_copy(update={"app_env": app_env}))
    await client.post("/api/auth/register", json=CREDENTIALS)

    unknown = await client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "secret-password"}
    )
    wrong = await client.post(
        "/api/auth/login", json={"email": CREDENTIALS["email"], "password": "wrong-password"}
    )

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.content == wrong.content


@pytest.mark.asyncio
async def test_default_client_login_rejections_match(client: AsyncClient):
    await client.post("/api/auth/register", json=CREDENTIALS)

    unknown = await client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "secret-password"}
    )
    wrong = await client.post(
        "/api/auth/login", json={"email": CREDENTIALS["email"], "password": "wrong-password"}
    )

    assert "stack" in unknown.json()
    assert unknown.content == wrong.content


@pytest.mark.asyncio
async def test_protected_route_requires_token(client: AsyncClient):
    response = await client.get("/api/protected")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_protected_route_accepts_valid_token(client: AsyncClient, register_and_login):
    _, headers = await register_and_login(client, "alice")

    response = await client.get("/api/protected", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "You have access to this protected route!"}


@pytest.mark.asyncio
async def test_protected_route_rejects_expired_token(client: AsyncClient, register_and_login):
    user_id, _ = await register_and_login(client, "alice")
    expired = JWTTokenService(get_settings().jwt_secret, expires_minutes=-5).issue(user_id)

    response = await client.get("/api/protected", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "header",
    ["Token abc", "Bearer", "Bearer a b", "bearer not-a-jwt"],
)
async def test_protected_route_rejects_malformed_header(client: AsyncClient, header: str):
    response = await client.get("/api/protected", headers={"Authorization": header})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_signed_with_another_secret_is_rejected(client: AsyncClient, register_and_login):
    user_id, _ = await register_and_login(client, "alice")
    forged = JWTTokenService("some-other-secret").issue(user_id)

    response = await client.get("/api/protected", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
