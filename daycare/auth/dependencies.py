import hmac
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.schemas import CallerIdentity
from daycare.auth.security import decode_access_token
from daycare.core.config import settings
from daycare.core.enums import ErrorCode, UserRole
from daycare.core.exceptions import ServiceError
from daycare.core.models import User
from daycare.db.session import get_db


bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHENTICATED_MESSAGE = "User must be authenticated"


async def get_optional_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[CallerIdentity]:
    """Resolve the caller from the bearer token; None when no usable token was sent."""
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        return None
    uid = payload.get("sub")
    if not uid:
        return None
    claims = {k: v for k, v in payload.items() if k not in ("sub", "exp", "iat")}
    return CallerIdentity(uid=uid, claims=claims)


async def get_caller(
    caller: Optional[CallerIdentity] = Depends(get_optional_caller),
) -> CallerIdentity:
    if caller is None:
        raise ServiceError(UNAUTHENTICATED_MESSAGE, ErrorCode.UNAUTHENTICATED)
    return caller


async def get_stored_role(db: AsyncSession, uid: str) -> Optional[str]:
    profile = await db.get(User, uid)
    return profile.role if profile else None


def require_admin(action: str):
    """
    Dependency factory: super-admin claim, or a stored profile role of "admin".

    Example:
        Depends(require_admin("create users"))
    """

    async def _checker(
        caller: CallerIdentity = Depends(get_caller),
        db: AsyncSession = Depends(get_db),
    ) -> CallerIdentity:
        if caller.is_super_admin:
            return caller
        if await get_stored_role(db, caller.uid) != UserRole.ADMIN.value:
            raise ServiceError(f"Only admins can {action}", ErrorCode.PERMISSION_DENIED)
        return caller

    return _checker


async def require_super_admin(caller: CallerIdentity = Depends(get_caller)) -> CallerIdentity:
    if not caller.is_super_admin:
        raise ServiceError("Only super admins can create organizations", ErrorCode.PERMISSION_DENIED)
    return caller


async def require_platform_secret(
    x_platform_secret: Optional[str] = Header(None, alias="X-Platform-Secret"),
) -> None:
    """Guard for routes invoked by the scheduler or the event relay rather than by end users."""
    expected = settings.platform_secret
    if not expected:
        raise ServiceError("Platform invocation is not configured", ErrorCode.PERMISSION_DENIED)
    if not x_platform_secret or not hmac.compare_digest(x_platform_secret, expected):
        raise ServiceError("Invalid platform secret", ErrorCode.UNAUTHENTICATED)
