from typing import List, Optional

from pydantic import BaseModel, Field


class SignatureRequestCreatedEvent(BaseModel):
    """Snapshot of the signature request document that was just written. Ids may be absent on malformed writes."""

    userId: Optional[str] = None
    documentId: Optional[str] = None


class NotificationOutcome(BaseModel):
    delivered: bool = False
    skipped: bool = False
    messageId: str = ""
    errors: List[str] = Field(default_factory=list)
