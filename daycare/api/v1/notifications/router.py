from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.dependencies import require_platform_secret
from daycare.core.platform import get_push_sender
from daycare.db.session import get_db

from .schemas import NotificationOutcome, SignatureRequestCreatedEvent
from . import service

router = APIRouter(prefix="/api/v1/triggers", tags=["triggers"])


@router.post(
    "/signatureRequests/{request_id}",
    response_model=NotificationOutcome,
    dependencies=[Depends(require_platform_secret)],
)
async def on_signature_request_created(
    request_id: str,
    event: Optional[SignatureRequestCreatedEvent] = None,
    db: AsyncSession = Depends(get_db),
    push_sender=Depends(get_push_sender),
) -> NotificationOutcome:
    """Event relay hook fired after a signature request is written. Always 200."""
    return await service.notify_user_of_new_document(
        db, push_sender, request_id, event or SignatureRequestCreatedEvent()
    )
