"""
Grant the super-admin attribute to one identity account.

Run once with the target uid (or SUPER_ADMIN_UID set):
  python -m daycare.scripts.set_super_admin <uid>

Sets custom claims {"superAdmin": true} on the account and reads it back.
The user must sign out and back in before their token carries the claim.
"""
import asyncio
import sys
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from daycare.core.config import settings
from daycare.db.session import AsyncSessionLocal
from daycare.services.identity import IdentityProvider

SUPER_ADMIN_CLAIMS = {"superAdmin": True}


async def set_super_admin(db: AsyncSession, uid: str) -> dict:
    identity = IdentityProvider(db)
    print(f"Granting super admin to user {uid}...")
    await identity.set_custom_claims(uid, SUPER_ADMIN_CLAIMS)
    await db.commit()

    # Verify
    lookup = await identity.get_user(uid)
    account = lookup.account
    print("--- Done ---")
    print(f"User Email: {account.email}")
    print(f"Claims: {account.custom_claims}")
    print("\nNote: the user must sign out and sign in again for the claim to take effect.")
    return dict(account.custom_claims)


async def main(uid: Optional[str]) -> None:
    if not uid:
        raise SystemExit("Usage: python -m daycare.scripts.set_super_admin <uid> (or set SUPER_ADMIN_UID)")
    async with AsyncSessionLocal() as db:
        try:
            await set_super_admin(db, uid)
        except Exception as e:
            await db.rollback()
            print("Error:", e)
            raise


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else settings.super_admin_uid))
