from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.dependencies import get_caller
from daycare.auth.schemas import CallerIdentity
from daycare.core.platform import get_identity_provider
from daycare.db.session import get_db
from daycare.services.identity import IdentityProvider

from .schemas import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    CreateInvitationRequest,
    CreateInvitationResponse,
)
from . import service

router = APIRouter(prefix="/api/v1/functions", tags=["invitations"])


@router.post("/createInvitation", response_model=CreateInvitationResponse)
async def create_invitation(
    payload: CreateInvitationRequest,
    db: AsyncSession = Depends(get_db),
    caller: CallerIdentity = Depends(get_caller),
) -> CreateInvitationResponse:
    """Invite an email to a school with a role. Caller must be an admin member of that school."""
    return await service.create_invitation(db, caller.uid, payload)


@router.post("/acceptInvitation", response_model=AcceptInvitationResponse)
async def accept_invitation(
    payload: AcceptInvitationRequest,
    db: AsyncSession = Depends(get_db),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> AcceptInvitationResponse:
    """Redeem an invitation token. No caller identity needed; the token is the credential."""
    return await service.accept_invitation(db, identity, payload)
