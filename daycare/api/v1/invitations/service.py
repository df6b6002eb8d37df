"""
Invitation issue and redemption.

Invariant: at most one pending invitation per (email, school_id). Acceptance
flips pending -> accepted with a conditional UPDATE inside the same
transaction as the account, profile and membership writes, so a token can
only be redeemed once even under concurrent acceptance.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.enums import INVITABLE_ROLES, ErrorCode, InvitationStatus, UserRole
from daycare.core.exceptions import ServiceError
from daycare.core.identifiers import email_local_part, generate_token
from daycare.core.models import Invitation, School, SchoolMember, User
from daycare.core.timeutil import utcnow
from daycare.services.identity import IdentityProvider

from .schemas import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    CreateInvitationRequest,
    CreateInvitationResponse,
)

logger = logging.getLogger(__name__)

_INVITABLE = {r.value for r in INVITABLE_ROLES}

INVALID_INVITATION_MESSAGE = "Invalid or expired invitation"


async def has_pending_invitation(db: AsyncSession, email: str, school_id: str) -> bool:
    result = await db.execute(
        select(Invitation.id).where(
            Invitation.email == email,
            Invitation.school_id == school_id,
            Invitation.status == InvitationStatus.PENDING.value,
        ).limit(1)
    )
    return result.scalar_one_or_none() is not None


def build_invitation(
    *,
    email: str,
    school_id: str,
    school_name: str,
    role: str,
    created_by: str,
    organization_id: Optional[str] = None,
) -> Invitation:
    """New pending invitation with a fresh token. Caller adds it to the session."""
    return Invitation(
        email=email.lower(),
        school_id=school_id,
        school_name=school_name,
        role=role,
        token=generate_token(),
        status=InvitationStatus.PENDING.value,
        organization_id=organization_id,
        created_by=created_by,
        created_at=utcnow(),
    )


async def _require_school_admin(db: AsyncSession, school_id: str, caller_uid: str) -> None:
    member = await db.get(SchoolMember, (school_id, caller_uid))
    if member is None or member.role != UserRole.ADMIN.value:
        raise ServiceError("Only school admins can create invitations", ErrorCode.PERMISSION_DENIED)


async def create_invitation(
    db: AsyncSession,
    caller_uid: str,
    payload: CreateInvitationRequest,
) -> CreateInvitationResponse:
    if payload.role not in _INVITABLE:
        raise ServiceError("Invalid role. Must be admin, teacher, or parent", ErrorCode.INVALID_ARGUMENT)

    email = payload.email.lower()
    try:
        await _require_school_admin(db, payload.schoolId, caller_uid)

        school = await db.get(School, payload.schoolId)
        if school is None:
            raise ServiceError("School not found", ErrorCode.NOT_FOUND)

        if await has_pending_invitation(db, email, payload.schoolId):
            raise ServiceError("A pending invitation already exists for this email", ErrorCode.ALREADY_EXISTS)

        invitation = build_invitation(
            email=email,
            school_id=payload.schoolId,
            school_name=school.name,
            role=payload.role,
            created_by=caller_uid,
        )
        db.add(invitation)
        await db.commit()
    except ServiceError:
        raise
    except Exception as e:
        await db.rollback()
        logger.exception("Error creating invitation")
        raise ServiceError(f"Failed to create invitation: {e}", ErrorCode.INTERNAL) from e

    logger.info("Created invitation %s for %s to %s", invitation.id, email, school.name)
    return CreateInvitationResponse(invitationId=invitation.id, token=invitation.token)


async def _find_pending_invitation(db: AsyncSession, token: str) -> Optional[Invitation]:
    result = await db.execute(
        select(Invitation).where(
            Invitation.token == token,
            Invitation.status == InvitationStatus.PENDING.value,
        ).limit(1)
    )
    return result.scalar_one_or_none()


async def accept_invitation(
    db: AsyncSession,
    identity: IdentityProvider,
    payload: AcceptInvitationRequest,
) -> AcceptInvitationResponse:
    try:
        invite = await _find_pending_invitation(db, payload.token)
        if invite is None:
            raise ServiceError(INVALID_INVITATION_MESSAGE, ErrorCode.NOT_FOUND)

        now = utcnow()
        lookup = await identity.get_user_by_email(invite.email)
        if lookup.found:
            account = lookup.account
        else:
            account = await identity.create_user(
                email=invite.email,
                password=payload.password,
                display_name=payload.displayName,
            )

        profile = await db.get(User, account.uid)
        if profile is None:
            # Generic role; school-specific roles live on memberships
            profile = User(
                uid=account.uid,
                email=invite.email,
                username=email_local_part(invite.email),
                display_name=payload.displayName,
                role=UserRole.USER.value,
                school_ids=[],
                created_at=now,
            )
            db.add(profile)

        member = await db.get(SchoolMember, (invite.school_id, account.uid))
        if member is None:
            member = SchoolMember(school_id=invite.school_id, uid=account.uid)
            db.add(member)
        member.role = invite.role
        member.display_name = payload.displayName
        member.invited_at = now

        if invite.school_id not in (profile.school_ids or []):
            profile.school_ids = list(profile.school_ids or []) + [invite.school_id]

        claimed = await db.execute(
            update(Invitation)
            .where(
                Invitation.id == invite.id,
                Invitation.status == InvitationStatus.PENDING.value,
            )
            .values(status=InvitationStatus.ACCEPTED.value, accepted_at=now)
            .execution_options(synchronize_session=False)
        )
        if claimed.rowcount != 1:
            # Another request redeemed the token between our read and this write
            raise ServiceError(INVALID_INVITATION_MESSAGE, ErrorCode.NOT_FOUND)

        await db.commit()
    except ServiceError:
        await db.rollback()
        raise
    except Exception as e:
        await db.rollback()
        logger.exception("Error accepting invitation")
        raise ServiceError(f"Failed to accept invitation: {e}", ErrorCode.INTERNAL) from e

    logger.info("User %s accepted invitation to %s", account.uid, invite.school_name)
    return AcceptInvitationResponse(uid=account.uid, schoolId=invite.school_id, role=invite.role)
