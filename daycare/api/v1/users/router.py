from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.dependencies import require_admin
from daycare.core.platform import get_identity_provider
from daycare.db.session import get_db
from daycare.services.identity import IdentityProvider

from .schemas import (
    AdminCreateUserRequest,
    AdminCreateUserResponse,
    AdminUpdateUserRequest,
    AdminUpdateUserResponse,
)
from . import service

router = APIRouter(prefix="/api/v1/functions", tags=["users"])


@router.post(
    "/adminCreateUser",
    response_model=AdminCreateUserResponse,
    dependencies=[Depends(require_admin("create users"))],
)
async def admin_create_user(
    payload: AdminCreateUserRequest,
    db: AsyncSession = Depends(get_db),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> AdminCreateUserResponse:
    """Create a login account and profile. Super admins or users whose profile role is admin."""
    return await service.create_user(db, identity, payload)


@router.post(
    "/adminUpdateUser",
    response_model=AdminUpdateUserResponse,
    dependencies=[Depends(require_admin("update users"))],
)
async def admin_update_user(
    payload: AdminUpdateUserRequest,
    db: AsyncSession = Depends(get_db),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> AdminUpdateUserResponse:
    """Change username (login identifier), password or display name of an account."""
    return await service.update_user(db, identity, payload)
