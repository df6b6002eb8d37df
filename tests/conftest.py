import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.config import settings
from daycare.core.platform import get_blob_store, get_push_sender
from daycare.db.session import Base, build_engine, build_session_factory, get_db
from daycare.main import app

from tests.factories import InMemoryBlobStore, RecordingPushSender


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
PLATFORM_SECRET = "platform-test-secret"


@pytest.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database per test; overrides the FastAPI session dependency."""
    engine = build_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = build_session_factory(engine)
    async with async_session() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture()
def blob_store() -> InMemoryBlobStore:
    store = InMemoryBlobStore()
    app.dependency_overrides[get_blob_store] = lambda: store
    return store


@pytest.fixture()
def push_sender() -> RecordingPushSender:
    sender = RecordingPushSender()
    app.dependency_overrides[get_push_sender] = lambda: sender
    return sender


@pytest.fixture()
def platform_headers(monkeypatch) -> dict:
    monkeypatch.setattr(settings, "platform_secret", PLATFORM_SECRET)
    return {"X-Platform-Secret": PLATFORM_SECRET}


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
