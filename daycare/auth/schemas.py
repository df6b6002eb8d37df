from typing import Any, Dict

from pydantic import BaseModel, Field


class CallerIdentity(BaseModel):
    """Verified caller of a callable operation."""

    uid: str
    claims: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_super_admin(self) -> bool:
        return self.claims.get("superAdmin") is True
