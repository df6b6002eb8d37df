"""
Run one scheduled job and exit. Invoked by the external scheduler:

  python -m daycare.jobs.run cleanupOldPhotos
  python -m daycare.jobs.run resetDailyDisplayStatus
  python -m daycare.jobs.run autoSubmitMonthlyChecklists

A failing job exits non-zero so the scheduler records a failed run.
"""
import argparse
import asyncio
import json
import logging

from daycare.core.logging import configure_logging
from daycare.db.session import AsyncSessionLocal

from daycare.jobs.registry import scheduled_jobs

logger = logging.getLogger("daycare.jobs")


async def main(job_name: str) -> dict:
    job = scheduled_jobs()[job_name]
    async with AsyncSessionLocal() as db:
        return await job.run(db)


if __name__ == "__main__":
    configure_logging()
    parser = argparse.ArgumentParser(description="Run a scheduled maintenance job once.")
    parser.add_argument("job", choices=sorted(scheduled_jobs()))
    args = parser.parse_args()
    result = asyncio.run(main(args.job))
    print(json.dumps(result))
