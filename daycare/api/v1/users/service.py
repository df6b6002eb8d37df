"""Admin-gated account provisioning: identity account plus parallel profile row."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.enums import PROVISIONABLE_ROLES, ErrorCode
from daycare.core.exceptions import ServiceError
from daycare.core.identifiers import login_email
from daycare.core.models import User
from daycare.core.timeutil import utcnow
from daycare.services.identity import IdentityProvider

from .schemas import (
    AdminCreateUserRequest,
    AdminCreateUserResponse,
    AdminUpdateUserRequest,
    AdminUpdateUserResponse,
)

logger = logging.getLogger(__name__)

_ALLOWED_ROLES = {r.value for r in PROVISIONABLE_ROLES}


async def create_user(
    db: AsyncSession,
    identity: IdentityProvider,
    payload: AdminCreateUserRequest,
) -> AdminCreateUserResponse:
    if payload.role not in _ALLOWED_ROLES:
        raise ServiceError("Invalid role. Must be teacher, student, or admin", ErrorCode.INVALID_ARGUMENT)

    try:
        account = await identity.create_user(email=login_email(payload.username), password=payload.password)
        logger.info("Created user in Auth: %s", account.uid)

        profile = User(
            uid=account.uid,
            username=payload.username,
            role=payload.role,
            school_ids=[],
            created_at=utcnow(),
        )
        if payload.name:
            profile.name = payload.name
        if payload.organizationId:
            profile.organization_id = payload.organizationId
        db.add(profile)
        await db.commit()
        logger.info("Created user profile: %s", account.uid)
    except Exception as e:
        await db.rollback()
        logger.exception("Error creating user")
        raise ServiceError(f"Failed to create user: {e}", ErrorCode.INTERNAL) from e

    return AdminCreateUserResponse(uid=account.uid, username=payload.username)


async def update_user(
    db: AsyncSession,
    identity: IdentityProvider,
    payload: AdminUpdateUserRequest,
) -> AdminUpdateUserResponse:
    auth_changes = {}
    profile_changes = {}

    # A new username changes the login identifier too
    if payload.username:
        auth_changes["email"] = login_email(payload.username)
        profile_changes["username"] = payload.username
    if payload.password:
        auth_changes["password"] = payload.password
    if payload.name:
        profile_changes["name"] = payload.name

    try:
        if auth_changes:
            await identity.update_user(payload.uid, **auth_changes)
            logger.info("Updated user in Auth: %s", payload.uid)

        if profile_changes:
            profile = await db.get(User, payload.uid)
            if profile is None:
                raise LookupError(f"No user profile for uid {payload.uid}")
            for field_name, value in profile_changes.items():
                setattr(profile, field_name, value)
            profile.updated_at = utcnow()
            logger.info("Updated user profile: %s", payload.uid)

        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.exception("Error updating user")
        raise ServiceError(f"Failed to update user: {e}", ErrorCode.INTERNAL) from e

    return AdminUpdateUserResponse(uid=payload.uid)
