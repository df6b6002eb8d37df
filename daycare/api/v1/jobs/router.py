from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.dependencies import require_platform_secret
from daycare.core.platform import get_blob_store
from daycare.db.session import get_db
from daycare.jobs.checklists import auto_submit_monthly_checklists
from daycare.jobs.photo_cleanup import cleanup_old_photos
from daycare.jobs.registry import scheduled_jobs
from daycare.jobs.status_reset import reset_daily_display_status

router = APIRouter(
    prefix="/api/v1/jobs",
    tags=["jobs"],
    dependencies=[Depends(require_platform_secret)],
)


@router.get("")
async def list_jobs() -> list:
    """Job names with their cron expression and time zone, for configuring the scheduler."""
    return [
        {"name": job.name, "schedule": job.cron, "timeZone": job.time_zone}
        for job in scheduled_jobs().values()
    ]


@router.post("/cleanupOldPhotos")
async def run_cleanup_old_photos(
    db: AsyncSession = Depends(get_db),
    blob_store=Depends(get_blob_store),
) -> dict:
    return await cleanup_old_photos(db, blob_store)


@router.post("/resetDailyDisplayStatus")
async def run_reset_daily_display_status(db: AsyncSession = Depends(get_db)) -> dict:
    return await reset_daily_display_status(db)


@router.post("/autoSubmitMonthlyChecklists")
async def run_auto_submit_monthly_checklists(db: AsyncSession = Depends(get_db)) -> dict:
    return await auto_submit_monthly_checklists(db)
