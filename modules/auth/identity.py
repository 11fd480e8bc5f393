"""
Auth Module - External Identity Assertions
============================================
Reads the claims of a third-party identity token (e.g. a Google Sign-In
credential). The issuer's signature is NOT verified here; the claims are
trusted as-is.
"""

from dataclasses import dataclass
from typing import Callable

from jose import jwt
from jose.exceptions import JOSEError

from common.exceptions import InvalidAssertionError


@dataclass(frozen=True)
class IdentityClaims:
    email: str
    name: str
    subject_id: str


# Any callable with this shape can stand in for the decoder (tests inject fakes)
IdentityDecoder = Callable[[str], IdentityClaims]


def decode_identity_assertion(token: str) -> IdentityClaims:
    """Extract {email, name, sub} from a JWT without signature verification."""
    if not token or not token.strip():
        raise InvalidAssertionError("Missing identity credential.")
    try:
        claims = jwt.get_unverified_claims(token.strip())
    except JOSEError as e:
        raise InvalidAssertionError(f"Unreadable identity credential: {e}")

    email = (claims.get("email") or "").strip()
    subject_id = str(claims.get("sub") or "").strip()
    if not email or not subject_id:
        raise InvalidAssertionError("Identity credential has no email or subject.")

    name = (claims.get("name") or "").strip() or email.split("@")[0]
    return IdentityClaims(email=email, name=name, subject_id=subject_id)
