from sqlalchemy import Boolean, Column, DateTime, JSON, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class User(Base):
    """User profile. Keyed by the identity account uid."""

    __tablename__ = "users"

    uid = Column(String(64), primary_key=True)
    username = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    name = Column(String(255), nullable=True)
    display_name = Column(String(255), nullable=True)
    # teacher | student | admin | parent | user
    role = Column(String(50), nullable=False, index=True)
    organization_id = Column(String(255), nullable=True)
    # Set of school ids; always reassign a new list so the change is detected
    school_ids = Column(JSON, nullable=False, default=list)

    # Daily display state for students, reset nightly
    today_status = Column(String(50), nullable=True)
    today_date = Column(String(10), nullable=True)
    today_display_status = Column(JSON, nullable=True)
    has_unread_from_student = Column(Boolean, nullable=False, default=False)

    # Push registration token; null when the device never registered
    fcm_token = Column(String(512), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
