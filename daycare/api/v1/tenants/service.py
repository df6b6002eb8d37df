"""
Tenant creation: schools and organizations.

School owners are onboarded through an admin invitation; organization
owners are assigned directly (account created or reused, profile marked
admin of the organization).
"""

import logging
from datetime import timedelta
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from daycare.api.v1.invitations.service import build_invitation
from daycare.auth.schemas import CallerIdentity
from daycare.core.config import settings
from daycare.core.enums import ErrorCode, SubscriptionStatus, UserRole
from daycare.core.exceptions import ServiceError
from daycare.core.identifiers import email_local_part, school_id_for, slugify
from daycare.core.models import Organization, School, User
from daycare.core.timeutil import utcnow
from daycare.services.identity import IdentityProvider

from .schemas import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateSchoolRequest,
    CreateSchoolResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_NAME = "Admin"


async def _require_school_creator(db: AsyncSession, caller: CallerIdentity, organization_id: Optional[str] = None) -> None:
    if caller.is_super_admin:
        return
    if not organization_id:
        raise ServiceError("Only super admins can create standalone schools.", ErrorCode.PERMISSION_DENIED)
    profile = await db.get(User, caller.uid)
    if (
        profile is None
        or profile.organization_id != organization_id
        or profile.role != UserRole.ADMIN.value
    ):
        raise ServiceError(
            "You are not authorized to create a dayhome for this organization.",
            ErrorCode.PERMISSION_DENIED,
        )


async def create_school(
    db: AsyncSession,
    caller: CallerIdentity,
    payload: CreateSchoolRequest,
) -> CreateSchoolResponse:
    await _require_school_creator(db, caller, payload.organizationId)

    school_id = school_id_for(payload.name, payload.organizationId)
    if not school_id:
        raise ServiceError("School name must contain letters or digits", ErrorCode.INVALID_ARGUMENT)

    try:
        if await db.get(School, school_id) is not None:
            raise ServiceError("A school with this name already exists", ErrorCode.ALREADY_EXISTS)

        now = utcnow()
        school = School(
            id=school_id,
            name=payload.name,
            config=payload.config or {},
            subscription_status=SubscriptionStatus.TRIAL.value,
            trial_ends_at=now + timedelta(days=settings.trial_days),
            organization_id=payload.organizationId,
            created_at=now,
        )
        db.add(school)

        invitation = build_invitation(
            email=payload.adminEmail,
            school_id=school_id,
            school_name=payload.name,
            role=UserRole.ADMIN.value,
            created_by=caller.uid,
            organization_id=payload.organizationId,
        )
        db.add(invitation)
        await db.commit()
    except ServiceError:
        raise
    except Exception as e:
        await db.rollback()
        logger.exception("Error creating school")
        raise ServiceError(f"Failed to create school: {e}", ErrorCode.INTERNAL) from e

    logger.info("Created school %s with admin invitation for %s", school_id, invitation.email)
    return CreateSchoolResponse(
        schoolId=school_id,
        invitationId=invitation.id,
        adminInviteToken=invitation.token,
    )


async def create_organization(
    db: AsyncSession,
    identity: IdentityProvider,
    caller: CallerIdentity,
    payload: CreateOrganizationRequest,
) -> CreateOrganizationResponse:
    org_id = slugify(payload.name)
    if not org_id:
        raise ServiceError("Organization name must contain letters or digits", ErrorCode.INVALID_ARGUMENT)

    admin_email = payload.adminEmail.lower()
    try:
        if await db.get(Organization, org_id) is not None:
            raise ServiceError("An organization with this name already exists", ErrorCode.ALREADY_EXISTS)

        lookup = await identity.get_user_by_email(admin_email)
        if lookup.found:
            account = lookup.account
            logger.info("Found existing user: %s", account.uid)
        else:
            account = await identity.create_user(
                email=admin_email,
                password=payload.password,
                display_name=DEFAULT_ADMIN_NAME,
            )
            logger.info("Created new user: %s", account.uid)

        now = utcnow()
        db.add(Organization(id=org_id, name=payload.name, created_by=caller.uid, created_at=now))

        profile = await db.get(User, account.uid)
        if lookup.found and profile is not None:
            profile.organization_id = org_id
            profile.role = UserRole.ADMIN.value
            profile.updated_at = now
        elif lookup.found:
            db.add(User(
                uid=account.uid,
                organization_id=org_id,
                role=UserRole.ADMIN.value,
                school_ids=[],
                created_at=now,
                updated_at=now,
            ))
        else:
            db.add(User(
                uid=account.uid,
                email=admin_email,
                username=email_local_part(admin_email),
                name=DEFAULT_ADMIN_NAME,
                role=UserRole.ADMIN.value,
                organization_id=org_id,
                school_ids=[],
                created_at=now,
            ))

        await db.commit()
    except ServiceError:
        raise
    except Exception as e:
        await db.rollback()
        logger.exception("Error creating organization")
        raise ServiceError(f"Failed to create organization: {e}", ErrorCode.INTERNAL) from e

    logger.info("Assigned user %s as admin for %s", account.uid, org_id)
    return CreateOrganizationResponse(organizationId=org_id, uid=account.uid)
