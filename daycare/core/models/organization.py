from sqlalchemy import Column, DateTime, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class Organization(Base):
    """Top-level tenant. id is the slug of the name."""

    __tablename__ = "organizations"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    created_by = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
