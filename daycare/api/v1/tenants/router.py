from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.dependencies import get_caller, require_super_admin
from daycare.auth.schemas import CallerIdentity
from daycare.core.platform import get_identity_provider
from daycare.db.session import get_db
from daycare.services.identity import IdentityProvider

from .schemas import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateSchoolRequest,
    CreateSchoolResponse,
)
from . import service

router = APIRouter(prefix="/api/v1/functions", tags=["tenants"])


@router.post("/createSchool", response_model=CreateSchoolResponse)
async def create_school(
    payload: CreateSchoolRequest,
    db: AsyncSession = Depends(get_db),
    caller: CallerIdentity = Depends(get_caller),
) -> CreateSchoolResponse:
    """Create a school on a 30-day trial and invite its first admin. Super admins, or admins of the given organization."""
    return await service.create_school(db, caller, payload)


@router.post("/createOrganization", response_model=CreateOrganizationResponse)
async def create_organization(
    payload: CreateOrganizationRequest,
    db: AsyncSession = Depends(get_db),
    identity: IdentityProvider = Depends(get_identity_provider),
    caller: CallerIdentity = Depends(require_super_admin),
) -> CreateOrganizationResponse:
    """Create an organization and assign its admin directly. Super admins only."""
    return await service.create_organization(db, identity, caller, payload)
