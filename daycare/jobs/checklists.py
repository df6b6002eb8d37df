"""
Month-end checklist auto-submission.

Scheduled at 23:59 tenant-local on days 28-31; only the run on the real last
day of the month does anything.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.batching import chunked
from daycare.core.config import settings
from daycare.core.enums import SYSTEM_SUBMITTER
from daycare.core.models import ChecklistRecord
from daycare.core.timeutil import is_last_day_of_month, month_key, tenant_now, utcnow

logger = logging.getLogger(__name__)


async def auto_submit_monthly_checklists(
    db: AsyncSession,
    now: Optional[datetime] = None,
    batch_size: Optional[int] = None,
) -> dict:
    local_now = tenant_now(now)
    if not is_last_day_of_month(local_now.date()):
        logger.info("Not last day of month, skipping auto-submit")
        return {"success": True, "skipped": True}

    current_month = month_key(local_now.date())
    size = batch_size or settings.batch_size
    logger.info("Starting checklist auto-submission for %s", current_month)

    batches = 0
    try:
        result = await db.execute(
            select(ChecklistRecord.id).where(
                ChecklistRecord.month == current_month,
                ChecklistRecord.is_submitted.is_(False),
            )
        )
        record_ids = list(result.scalars().all())
        if not record_ids:
            logger.info("No unsubmitted records found for %s", current_month)
            return {"success": True, "month": current_month, "submittedCount": 0, "batches": 0}

        submitted_at = utcnow()
        for chunk in chunked(record_ids, size):
            await db.execute(
                update(ChecklistRecord)
                .where(ChecklistRecord.id.in_(chunk))
                .values(is_submitted=True, submitted_at=submitted_at, submitted_by=SYSTEM_SUBMITTER)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
            batches += 1
    except Exception:
        await db.rollback()
        logger.exception("Error during checklist auto-submission")
        raise

    logger.info("Auto-submitted %d checklist records for %s", len(record_ids), current_month)
    return {
        "success": True,
        "month": current_month,
        "submittedCount": len(record_ids),
        "batches": batches,
    }
