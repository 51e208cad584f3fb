"""Tests for the read-only user routes."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_users_hides_password_hashes(client: AsyncClient, register_and_login):
    await register_and_login(client, "alice")
    await register_and_login(client, "bob")

    response = await client.get("/api/users")

    assert response.status_code == 200
    users = response.json()
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert all(set(u) == {"id", "username", "email"} for u in users)


@pytest.mark.asyncio
async def test_list_users_paginates(client: AsyncClient, register_and_login):
    for name in ("alice", "bob", "carol"):
        await register_and_login(client, name)

    response = await client.get("/api/users", params={"page": 2, "limit": 2})

    assert [u["username"] for u in response.json()] == ["carol"]


@pytest.mark.asyncio
async def test_get_user_by_id(client: AsyncClient, register_and_login):
    user_id, _ = await register_and_login(client, "alice")

    response = await client.get(f"/api/users/{user_id}")

    assert response.status_code == 200
    assert response.json() == {"id": user_id, "username": "alice", "email": "alice@example.com"}


@pytest.mark.asyncio
async def test_get_missing_user_is_not_found(client: AsyncClient):
    response = await client.get("/api/users/12345")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_user_with_non_numeric_id_is_rejected(client: AsyncClient):
    response = await client.get("/api/users/1e3")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_users_with_oversized_pagination_falls_back_to_defaults(
    client: AsyncClient, register_and_login
):
    await register_and_login(client, "alice")

    response = await client.get("/api/users", params={"page": "9" * 30, "limit": "9" * 30})

    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == ["alice"]
