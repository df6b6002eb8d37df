import uuid

from sqlalchemy import Column, DateTime, JSON, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class DailyStatus(Base):
    """Per-student per-day attendance/photo record. Expired rows are removed by the photo cleanup job."""

    __tablename__ = "daily_status"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    student_id = Column(String(64), nullable=True, index=True)
    # YYYY-MM-DD; compared as a string against the retention cutoff
    date = Column(String(10), nullable=True, index=True)
    # [{"url": "https://.../o/<encoded path>?alt=media"}, ...]
    photos = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
