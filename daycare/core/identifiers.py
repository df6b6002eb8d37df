"""
Tenant id slugs and invitation tokens.

Slugs are derived from display names and double as document ids, so two
names that collapse to the same slug collide. Tokens are single-use bearer
secrets and use `secrets` for the random part.
"""

import re
import secrets
import string
from typing import Optional

from daycare.core.config import settings

TOKEN_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
TOKEN_LENGTH = 32

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Lowercase, collapse every run of non-alphanumeric characters into one hyphen
    and strip leading/trailing hyphens.

    Examples:
        "Sunny Days Daycare" -> "sunny-days-daycare"
        "  A&B -- Kids!! "   -> "a-b-kids"
    """
    return _NON_ALNUM_RUN.sub("-", name.lower()).strip("-")


def school_id_for(name: str, organization_id: Optional[str] = None) -> str:
    """School ids are namespaced by organization: "<slug>_<organizationId>"."""
    slug = slugify(name)
    if not slug:
        return ""
    return f"{slug}_{organization_id}" if organization_id else slug


def generate_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def login_email(username: str) -> str:
    """Synthetic login identifier for username-based accounts."""
    return f"{username.lower()}@{settings.login_domain}"


def email_local_part(email: str) -> str:
    return email.split("@")[0]
