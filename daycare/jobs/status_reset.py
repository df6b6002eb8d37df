"""Nightly reset of every student's display state. Scheduled at 00:00 tenant-local time."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.batching import chunked
from daycare.core.config import settings
from daycare.core.enums import NOT_ARRIVED, UserRole
from daycare.core.models import User
from daycare.core.timeutil import tenant_now

logger = logging.getLogger(__name__)


def empty_display_status() -> dict:
    return {
        "mealStatus": False,
        "toiletStatus": False,
        "sleepStatus": False,
        "photosCount": 0,
        "isAbsent": False,
    }


async def reset_daily_display_status(
    db: AsyncSession,
    now: Optional[datetime] = None,
    batch_size: Optional[int] = None,
) -> dict:
    today = tenant_now(now).date().isoformat()
    size = batch_size or settings.batch_size
    logger.info("Starting daily status reset for %s", today)

    try:
        result = await db.execute(select(User.uid).where(User.role == UserRole.STUDENT.value))
        student_ids = list(result.scalars().all())
        if not student_ids:
            logger.info("No students found to reset")
            return {"success": True, "resetCount": 0, "resetDate": today}

        for chunk in chunked(student_ids, size):
            await db.execute(
                update(User)
                .where(User.uid.in_(chunk))
                .values(
                    today_status=NOT_ARRIVED,
                    today_date=today,
                    today_display_status=empty_display_status(),
                    has_unread_from_student=False,
                )
                .execution_options(synchronize_session=False)
            )
            await db.commit()
    except Exception:
        await db.rollback()
        logger.exception("Error resetting daily status")
        raise

    logger.info("Reset status for %d students", len(student_ids))
    return {"success": True, "resetCount": len(student_ids), "resetDate": today}
