from typing import Optional

from pydantic import BaseModel, Field


class AdminCreateUserRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, description="teacher | student | admin")
    name: Optional[str] = Field(None, max_length=255)
    organizationId: Optional[str] = Field(None, description="Inherited from the creating admin's organization")


class AdminCreateUserResponse(BaseModel):
    success: bool = True
    uid: str
    username: str


class AdminUpdateUserRequest(BaseModel):
    uid: str = Field(..., min_length=1)
    username: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = None
    name: Optional[str] = Field(None, max_length=255)


class AdminUpdateUserResponse(BaseModel):
    success: bool = True
    uid: str
