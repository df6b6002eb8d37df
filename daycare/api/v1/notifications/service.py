"""Push notification for new signature requests. Never raises: delivery must not fail the triggering write."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.models import Document, User
from daycare.services.outcome import BestEffortOutcome
from daycare.services.push import PushMessage

from .schemas import NotificationOutcome, SignatureRequestCreatedEvent

logger = logging.getLogger(__name__)

NEW_DOCUMENT_TITLE = "New Document to Sign"


async def notify_user_of_new_document(
    db: AsyncSession,
    push_sender,
    request_id: str,
    event: SignatureRequestCreatedEvent,
) -> NotificationOutcome:
    logger.info("New signature request for user %s, document %s", event.userId, event.documentId)
    outcome = BestEffortOutcome()
    message_id = ""

    try:
        if not event.userId or not event.documentId:
            logger.warning("Signature request %s is missing userId or documentId, skipping notification", request_id)
            outcome.skip()
            return _to_response(outcome, message_id)

        document = await db.get(Document, event.documentId)
        if document is None:
            logger.info("Document not found: %s", event.documentId)
            outcome.skip()
        else:
            user = await db.get(User, event.userId)
            if user is None:
                logger.info("User not found: %s", event.userId)
                outcome.skip()
            elif not user.fcm_token:
                logger.info("User %s has no FCM token, skipping notification", event.userId)
                outcome.skip()
            else:
                message = PushMessage(
                    token=user.fcm_token,
                    title=NEW_DOCUMENT_TITLE,
                    body=f"You have a new document: {document.title}",
                    data={
                        "type": "new_document",
                        "documentId": event.documentId,
                        "requestId": request_id,
                    },
                )
                message_id = await push_sender.send(message)
                outcome.success()
                logger.info("Sent notification to user %s: %s", event.userId, message_id)
    except Exception as e:
        logger.exception("Error sending notification for signature request %s", request_id)
        outcome.fail(str(e))

    return _to_response(outcome, message_id)


def _to_response(outcome: BestEffortOutcome, message_id: str) -> NotificationOutcome:
    return NotificationOutcome(
        delivered=outcome.succeeded > 0,
        skipped=outcome.skipped > 0,
        messageId=message_id,
        errors=outcome.errors,
    )
