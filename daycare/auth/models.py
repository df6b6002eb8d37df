import uuid

from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


def _new_uid() -> str:
    return uuid.uuid4().hex


class AuthAccount(Base):
    """
    Identity-provider account: login identifier, credential and custom claims.

    Profile data (role, tenant links) lives on `users`; this table only answers
    "who can sign in" and "which privilege attributes ride on their token".
    """

    __tablename__ = "auth_accounts"

    uid = Column(String(64), primary_key=True, default=_new_uid)
    # Login identifier; lowercase, unique across the platform
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    display_name = Column(String(255), nullable=True)
    disabled = Column(Boolean, nullable=False, default=False)
    # e.g. {"superAdmin": true}
    custom_claims = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
