from sqlalchemy import Column, DateTime, ForeignKey, JSON, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class School(Base):
    """
    Tenant scoped under an organization, or standalone.

    - id: slug of the name, suffixed "_<organization_id>" when the school belongs to one.
    - subscription_status / trial_ends_at: trial state; every school starts on a trial.
    """

    __tablename__ = "schools"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    config = Column(JSON, nullable=False, default=dict)
    subscription_status = Column(String(20), nullable=False, default="trial")
    trial_ends_at = Column(DateTime(timezone=True), nullable=True)
    organization_id = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class SchoolMember(Base):
    """Membership: binds a user to a school with a role."""

    __tablename__ = "school_members"

    school_id = Column(String(255), ForeignKey("schools.id", ondelete="CASCADE"), primary_key=True)
    uid = Column(String(64), primary_key=True)
    # admin | teacher | parent
    role = Column(String(50), nullable=False)
    display_name = Column(String(255), nullable=True)
    invited_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
