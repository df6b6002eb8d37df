import uuid

from sqlalchemy import Column, DateTime, String

from daycare.core.timeutil import utcnow
from daycare.db.session import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


class SignatureRequest(Base):
    """Links a user to a document pending signature. Creation triggers a push notification."""

    __tablename__ = "signature_requests"

    id = Column(String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id = Column(String(64), nullable=False, index=True)
    document_id = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
