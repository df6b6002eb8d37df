"""Scheduled jobs by name, with the schedule the external scheduler should use for each."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.config import settings
from daycare.core.platform import get_blob_store

from .checklists import auto_submit_monthly_checklists
from .photo_cleanup import cleanup_old_photos
from .status_reset import reset_daily_display_status


@dataclass(frozen=True)
class ScheduledJob:
    name: str
    cron: str
    time_zone: str
    run: Callable[[AsyncSession], Awaitable[dict]]


async def _run_cleanup(db: AsyncSession) -> dict:
    return await cleanup_old_photos(db, get_blob_store())


async def _run_reset(db: AsyncSession) -> dict:
    return await reset_daily_display_status(db)


async def _run_checklists(db: AsyncSession) -> dict:
    return await auto_submit_monthly_checklists(db)


def scheduled_jobs() -> Dict[str, ScheduledJob]:
    jobs = [
        ScheduledJob("cleanupOldPhotos", "0 0 * * *", "UTC", _run_cleanup),
        ScheduledJob("resetDailyDisplayStatus", "0 0 * * *", settings.tenant_timezone, _run_reset),
        # Fires on days 28-31; the job itself checks for the real last day
        ScheduledJob("autoSubmitMonthlyChecklists", "59 23 28-31 * *", settings.tenant_timezone, _run_checklists),
    ]
    return {job.name: job for job in jobs}
