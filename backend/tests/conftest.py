"""Shared fixtures: an in-memory SQLite database and an HTTP client per test."""

import os

# Must be set before blog_api reads its cached settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from blog_api.config import Settings, get_settings
from blog_api.infrastructure.database import Base, get_db_session
from blog_api.infrastructure.database.session import build_engine
from blog_api.main import create_app


@pytest_asyncio.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    engine = build_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


def build_test_app(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings | None = None,
) -> FastAPI:
    """Create the app with its DB session bound to the test database."""
    app = create_app(settings or get_settings())

    async def override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    return app


@pytest_asyncio.fixture
async def make_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[Callable[..., AsyncClient]]:
    """Factory for clients against differently-configured apps sharing one database."""
    clients: list[AsyncClient] = []

    def _make(settings: Settings | None = None, overrides: dict | None = None) -> AsyncClient:
        app = build_test_app(session_factory, settings)
        app.dependency_overrides.update(overrides or {})
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest_asyncio.fixture
async def client(make_client: Callable[..., AsyncClient]) -> AsyncClient:
    return make_client()


@pytest.fixture
def register_and_login() -> Callable[..., Awaitable[tuple[int, dict[str, str]]]]:
    """Register a user through the API; returns (user_id, Authorization headers)."""

    async def _register_and_login(
        client: AsyncClient,
        username: str,
        email: str | None = None,
        password: str = "secret-password",
    ) -> tuple[int, dict[str, str]]:
        email = email or f"{username}@example.com"
        registered = await client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert registered.status_code == 201, registered.text
        logged_in = await client.post("/api/auth/login", json={"email": email, "password": password})
        assert logged_in.status_code == 200, logged_in.text
        body = logged_in.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return _register_and_login