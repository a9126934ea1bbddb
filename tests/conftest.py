import os
from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from ticketing.db.session import Base, get_db
from ticketing.main import app

# Fixtures in other modules are only visible when registered as plugins.
pytest_plugins = ["tests.seeds"]

# CI points this at Postgres (postgresql+asyncpg://ticketing@localhost:5432/ticketing_test).
# Locally it falls back to an in-memory SQLite database shared through one connection.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=StaticPool if TEST_DATABASE_URL.startswith("sqlite") else NullPool,
)
async_session = async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db() -> AsyncIterator[AsyncSession]:
    """Create tables and yield a session, then drop tables after test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    # Each test runs in its own event loop; don't carry connections across.
    await engine.dispose()


def _client(raise_app_exceptions: bool) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions),
        base_url="http://test",
    )


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncIterator[AsyncClient]:
    """HTTP client that uses the test database session."""

    async def override_get_db() -> AsyncIterator[AsyncSession]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with _client(raise_app_exceptions=True) as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def lenient_client(client: AsyncClient) -> AsyncIterator[AsyncClient]:
    """Client for catch-all tests.

    Starlette re-raises unhandled exceptions after the 500 handler has sent
    its response; this client returns that response instead of raising.
    """
    async with _client(raise_app_exceptions=False) as lenient:
        yield lenient
