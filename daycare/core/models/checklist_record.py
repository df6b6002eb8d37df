import uuid

from sqlalchemy import Boolean, Column, DateTime, Index, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class ChecklistRecord(Base):
    """Monthly compliance record. Flipped to submitted by the month-end job if staff never submitted it."""

    __tablename__ = "checklist_records"
    __table_args__ = (
        Index("ix_checklist_records_month_submitted", "month", "is_submitted"),
    )

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    school_id = Column(String(255), nullable=True)
    # YYYY-MM
    month = Column(String(7), nullable=False)
    is_submitted = Column(Boolean, nullable=False, default=False)
    submitted_at = Column(DateTime(timezone=True), nullable=True)
    submitted_by = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
