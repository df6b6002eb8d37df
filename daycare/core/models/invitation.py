import uuid

from sqlalchemy import Column, DateTime, Index, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class Invitation(Base):
    """Single-use onboarding token binding an email to a school role. pending -> accepted exactly once."""

    __tablename__ = "invitations"
    __table_args__ = (
        Index("ix_invitations_email_school_status", "email", "school_id", "status"),
    )

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    # Stored lowercase
    email = Column(String(255), nullable=False)
    school_id = Column(String(255), nullable=False)
    school_name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)
    token = Column(String(64), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default="pending")
    organization_id = Column(String(255), nullable=True)
    created_by = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    accepted_at = Column(DateTime(timezone=True), nullable=True)
