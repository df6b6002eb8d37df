from typing import Optional

from pydantic import BaseModel, Field


class CreateInvitationRequest(BaseModel):
    email: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, description="admin | teacher | parent")
    schoolId: str = Field(..., min_length=1)


class CreateInvitationResponse(BaseModel):
    success: bool = True
    invitationId: str
    token: str


class AcceptInvitationRequest(BaseModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    displayName: Optional[str] = Field(None, max_length=255)


class AcceptInvitationResponse(BaseModel):
    success: bool = True
    uid: str
    schoolId: str
    role: str
