"""Date-boundary helpers shared by the scheduled jobs and tenant creation."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from daycare.core.config import settings


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def tenant_now(now: Optional[datetime] = None) -> datetime:
    """Current time in the tenant's local zone. Naive datetimes are taken as UTC."""
    now = now or utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(settings.tenant_timezone))


def retention_cutoff(now: datetime, days: int) -> str:
    """YYYY-MM-DD of the UTC date `days` before now. Records dated before it are expired."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return (now.date() - timedelta(days=days)).isoformat()


def is_last_day_of_month(day: date) -> bool:
    return (day + timedelta(days=1)).month != day.month


def month_key(day: date) -> str:
    return f"{day.year}-{day.month:02d}"
