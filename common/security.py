"""
Seed Haven - Security Utilities
==================================
Password hashing. Stored records carry a salted HMAC digest, never the
plaintext password.
"""

import hmac
import hashlib
import secrets
from typing import Optional

from config.settings import PASSWORD_SECRET


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Create a salted HMAC-SHA256 digest of a password: '<salt>$<hexdigest>'."""
    salt = salt or secrets.token_hex(8)
    msg = f"{salt}:{password}".encode("utf-8")
    digest = hmac.new(PASSWORD_SECRET.encode("utf-8"), msg, hashlib.sha256).hexdigest()
    return f"{salt}${digest}"


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check a password against a stored digest. Accounts without one never match."""
    if not stored or "$" not in stored:
        return False
    salt, _ = stored.split("$", 1)
    return hmac.compare_digest(hash_password(password, salt), stored)
