from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class CreateSchoolRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    adminEmail: str = Field(..., min_length=1)
    organizationId: Optional[str] = Field(None, description="Link the school to an organization; namespaces its id")
    config: Optional[Dict[str, Any]] = None


class CreateSchoolResponse(BaseModel):
    success: bool = True
    schoolId: str
    invitationId: str
    adminInviteToken: str


class CreateOrganizationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    adminEmail: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class CreateOrganizationResponse(BaseModel):
    success: bool = True
    organizationId: str
    uid: str
