"""Service test fixtures — document stores + FastAPI test client.

Invariants:
    - Every test gets a fresh MemoryDocumentStore behind the API
    - sql_store runs against a fresh in-memory SQLite database
    - get_store dependency overridden; the middleware stack stays real

Design Decisions:
    - SQLite in-memory for SqlDocumentStore: PostgreSQL-specific features
      are not exercised by the documents table
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_store
from app.core.documents import User
from app.db.base import Base
from app.infrastructure.document_store import MemoryDocumentStore, SqlDocumentStore
from app.main import app


@pytest.fixture
def memory_store():
    return MemoryDocumentStore()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def sql_store(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield SqlDocumentStore(session)


@pytest.fixture
async def client(memory_store):
    """FastAPI test client with the document store overridden."""
    async def override_get_store():
        yield memory_store

    app.dependency_overrides[get_store] = override_get_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_user(memory_store):
    """Insert a user directly into the store."""
    user = User(uid="ada", name="Ada Lovelace", email="ada@example.test")
    await memory_store.store_user(user)
    return user
