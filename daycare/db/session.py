from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from daycare.core.config import settings


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    Server databases get pool_pre_ping (drop connections the server closed while idle)
    and pool_recycle. In-memory sqlite shares a single connection, otherwise every
    checkout would see a fresh empty database. Keyword arguments override the defaults.
    """
    options = {"echo": False, "future": True}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            options["poolclass"] = StaticPool
    else:
        options.update(pool_pre_ping=True, pool_recycle=300)
    options.update(kwargs)
    return create_async_engine(url, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # Handlers and jobs read attributes after commit
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(settings.database_url)

AsyncSessionLocal = build_session_factory(engine)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
