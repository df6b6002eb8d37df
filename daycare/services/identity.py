"""
Identity provider backed by the `auth_accounts` table.

Lookups return an `AccountLookup` carrying a `LookupStatus` so callers branch
on FOUND / NOT_FOUND instead of catching a provider-specific error. Writes
are flushed, not committed: the calling service owns the transaction.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.models import AuthAccount
from daycare.auth.security import hash_password
from daycare.core.enums import LookupStatus


class IdentityError(Exception):
    """Raised for provider-level failures (duplicate email, unknown uid)."""


@dataclass
class AccountLookup:
    status: LookupStatus
    account: Optional[AuthAccount] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class IdentityProvider:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_user(self, uid: str) -> AccountLookup:
        account = await self.db.get(AuthAccount, uid)
        if account is None:
            return AccountLookup(LookupStatus.NOT_FOUND)
        return AccountLookup(LookupStatus.FOUND, account)

    async def get_user_by_email(self, email: str) -> AccountLookup:
        result = await self.db.execute(select(AuthAccount).where(AuthAccount.email == email.lower()))
        account = result.scalar_one_or_none()
        if account is None:
            return AccountLookup(LookupStatus.NOT_FOUND)
        return AccountLookup(LookupStatus.FOUND, account)

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        display_name: Optional[str] = None,
        disabled: bool = False,
    ) -> AuthAccount:
        email = email.lower()
        if (await self.get_user_by_email(email)).found:
            raise IdentityError(f"The email address {email} is already in use by another account")
        account = AuthAccount(
            email=email,
            password_hash=hash_password(password),
            display_name=display_name,
            disabled=disabled,
            custom_claims={},
        )
        self.db.add(account)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise IdentityError(f"The email address {email} is already in use by another account") from e
        return account

    async def update_user(
        self,
        uid: str,
        *,
        email: Optional[str] = None,
        password: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> AuthAccount:
        lookup = await self.get_user(uid)
        if not lookup.found:
            raise IdentityError(f"There is no user record corresponding to the provided identifier: {uid}")
        account = lookup.account
        if email is not None:
            email = email.lower()
            other = await self.get_user_by_email(email)
            if other.found and other.account.uid != uid:
                raise IdentityError(f"The email address {email} is already in use by another account")
            account.email = email
        if password is not None:
            account.password_hash = hash_password(password)
        if display_name is not None:
            account.display_name = display_name
        await self.db.flush()
        return account

    async def set_custom_claims(self, uid: str, claims: Dict[str, Any]) -> AuthAccount:
        lookup = await self.get_user(uid)
        if not lookup.found:
            raise IdentityError(f"There is no user record corresponding to the provided identifier: {uid}")
        # Replace, don't merge: matches how claims are set on the token
        lookup.account.custom_claims = dict(claims)
        await self.db.flush()
        return lookup.account
