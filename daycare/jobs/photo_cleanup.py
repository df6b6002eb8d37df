"""
Photo retention cleanup. Scheduled daily at 00:00 UTC.

Daily status records dated strictly before (today - retention days) lose
their photo blobs and are then deleted. A photo that fails to delete is
recorded and skipped; it never blocks the record or the rest of the run.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.config import settings
from daycare.core.models import DailyStatus
from daycare.core.timeutil import retention_cutoff, utcnow
from daycare.services.blob_store import storage_path_from_url
from daycare.services.outcome import BestEffortOutcome

logger = logging.getLogger(__name__)


async def _delete_photos(blob_store, photos, outcome: BestEffortOutcome) -> None:
    for photo in photos or []:
        url = photo.get("url") if isinstance(photo, dict) else None
        object_path = storage_path_from_url(url)
        if object_path is None:
            outcome.skip()
            continue
        try:
            await blob_store.delete(object_path)
        except Exception as e:
            logger.error("Error deleting photo %s from storage: %s", object_path, e)
            outcome.fail(f"{object_path}: {e}")
            continue
        outcome.success()
        logger.info("Deleted photo: %s", object_path)


async def cleanup_old_photos(
    db: AsyncSession,
    blob_store,
    now: Optional[datetime] = None,
    retention_days: Optional[int] = None,
) -> dict:
    days = settings.photo_retention_days if retention_days is None else retention_days
    cutoff = retention_cutoff(now or utcnow(), days)
    logger.info("Starting photo cleanup for photos older than %s", cutoff)

    outcome = BestEffortOutcome()
    deleted_docs = 0
    try:
        result = await db.execute(select(DailyStatus).where(DailyStatus.date.is_not(None)))
        for record in result.scalars().all():
            # YYYY-MM-DD strings order the same as the dates they name
            if not record.date or record.date >= cutoff:
                continue
            await _delete_photos(blob_store, record.photos, outcome)
            await db.delete(record)
            await db.commit()
            deleted_docs += 1
            logger.info("Deleted daily status record: %s", record.id)
    except Exception:
        await db.rollback()
        logger.exception("Error during photo cleanup")
        raise

    logger.info(
        "Cleanup complete. Deleted %d photos and %d documents (%d photo failures).",
        outcome.succeeded, deleted_docs, len(outcome.errors),
    )
    return {
        "success": True,
        "deletedPhotos": outcome.succeeded,
        "deletedDocs": deleted_docs,
        "cutoffDate": cutoff,
        "errors": outcome.errors,
    }
