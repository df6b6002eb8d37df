"""
Create any missing tables for the registered models.

Run once per environment (idempotent):
  python -m daycare.db.schema_check
"""
import asyncio
import logging
from typing import List

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

import daycare.core.models  # noqa: F401  registers every table on Base.metadata
from daycare.core.logging import configure_logging
from daycare.db.session import Base, engine

logger = logging.getLogger(__name__)


async def missing_tables(bind: AsyncEngine) -> List[str]:
    async with bind.connect() as conn:
        existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    return [name for name in Base.metadata.tables if name not in existing]


async def ensure_schema(bind: AsyncEngine) -> List[str]:
    """Create missing tables and return their names."""
    missing = await missing_tables(bind)
    if missing:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Created tables: %s", ", ".join(missing))
    else:
        logger.info("All tables present.")
    return missing


if __name__ == "__main__":
    configure_logging()
    asyncio.run(ensure_schema(engine))
