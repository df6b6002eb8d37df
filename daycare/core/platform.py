"""
Collaborator wiring.

Settings, engine and session factory are created once at import; the
long-lived collaborators below are built once on first use. Routes receive
them through these dependencies so tests can swap them with
`app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.config import settings
from daycare.db.session import get_db
from daycare.services.blob_store import LocalBlobStore
from daycare.services.identity import IdentityProvider
from daycare.services.push import HttpPushSender


@lru_cache
def get_blob_store() -> LocalBlobStore:
    return LocalBlobStore(settings.storage_root)


@lru_cache
def get_push_sender() -> HttpPushSender:
    return HttpPushSender(settings.push_endpoint, settings.push_server_key)


async def get_identity_provider(db: AsyncSession = Depends(get_db)) -> IdentityProvider:
    return IdentityProvider(db)
