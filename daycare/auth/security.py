from datetime import timedelta
from typing import Dict, Optional

import bcrypt
from jose import jwt

from daycare.core.config import settings
from daycare.core.timeutil import utcnow


def hash_password(plain_password: str) -> str:
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # In case the stored hash is invalid/corrupted
        return False


def create_access_token(
    *, uid: str, claims: Optional[Dict] = None, expires_minutes: Optional[int] = None
) -> str:
    """Mint a caller token carrying the account's custom claims (used by scripts and tests)."""
    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes

    to_encode = dict(claims or {})
    to_encode.update({"sub": uid, "exp": utcnow() + timedelta(minutes=expires_minutes)})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict:
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
