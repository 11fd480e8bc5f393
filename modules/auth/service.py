"""
Auth Module - Service Layer
=============================
Identity store: accounts keyed by email, plus the active-user pointer.
The active user is handed back to the caller, who passes it into later
operations instead of reading shared state.
"""

import logging
from typing import Dict, Optional

from common.exceptions import (
    AuthenticationError, AuthorizationError, DuplicateError, ValidationError,
)
from common.helpers import generate_id, is_blank
from common.security import hash_password, verify_password
from modules.auth.identity import IdentityDecoder, decode_identity_assertion
from modules.storage.service import LocalStorage, users_key, active_user_key
from modules.user.models import User, UserMap

logger = logging.getLogger("seedhaven.auth")


class IdentityStore:
    """Signup, login, logout and whole-record updates of user accounts."""

    def __init__(self, storage: LocalStorage, decoder: IdentityDecoder = decode_identity_assertion):
        self.storage = storage
        self.decoder = decoder

    # ==========================================
    # Persistence
    # ==========================================

    def _load_users(self) -> Dict[str, User]:
        return self.storage.read_typed(users_key(), UserMap, {})

    def _save_users(self, users: Dict[str, User]):
        self.storage.write_typed(users_key(), UserMap, users)

    def _set_active(self, email: Optional[str]):
        if email:
            self.storage.set_item(active_user_key(), email)
        else:
            self.storage.remove_item(active_user_key())

    def get_user(self, email: str) -> Optional[User]:
        return self._load_users().get(email)

    def restore(self) -> Optional[User]:
        """Resolve the active-user pointer. A dangling pointer resolves to None."""
        email = self.storage.get_item(active_user_key())
        if not email:
            return None
        return self.get_user(email)

    # ==========================================
    # Account operations
    # ==========================================

    def signup(self, name: str, email: str, password: str, confirm_password: Optional[str] = None) -> User:
        """
        Create a new account and make it active.

        Raises:
            ValidationError if fields are blank or the confirmation does not match
            DuplicateError if the email is already registered
        """
        email = (email or "").strip()
        if is_blank(name) or is_blank(email) or is_blank(password):
            raise ValidationError("Name, email and password are required.")
        if confirm_password is not None and password != confirm_password:
            raise ValidationError("Passwords do not match.")

        users = self._load_users()
        if email in users:
            raise DuplicateError("User with this email already exists.")

        user = User(
            id=generate_id("user"),
            name=name.strip(),
            email=email,
            password=hash_password(password),
        )
        users[email] = user
        self._save_users(users)
        self._set_active(email)
        logger.info(f"New account {user.id} created")
        return user

    def login(self, email: str, password: str) -> User:
        """
        Make the matching account active.

        Raises:
            AuthenticationError if the email is unknown or the password is wrong.
            The active-user pointer is left untouched on failure.
        """
        user = self.get_user((email or "").strip())
        if not user or not verify_password(password or "", user.password):
            raise AuthenticationError(
                "Invalid credentials. Please try again, or create an account if you're new here."
            )
        self._set_active(user.email)
        return user

    def login_with_external_identity(self, credential: str) -> User:
        """
        Log in with a third-party identity assertion, creating a password-less
        account on first use. The assertion's claims are trusted as-is.

        Raises:
            InvalidAssertionError if the credential cannot be decoded
        """
        claims = self.decoder(credential)

        users = self._load_users()
        user = users.get(claims.email)
        if not user:
            user = User(id=claims.subject_id, name=claims.name, email=claims.email)
            users[claims.email] = user
            self._save_users(users)
            logger.info(f"New external-identity account {user.id} created")

        self._set_active(user.email)
        return user

    def logout(self):
        """Clear the active-user pointer. Persisted accounts and carts are kept."""
        self._set_active(None)

    def update_user(self, active: Optional[User], updated: User) -> User:
        """
        Replace the stored record of the active user with `updated`.

        Raises:
            AuthorizationError if nobody is active or `updated` belongs to another account
        """
        if active is None or active.email != updated.email:
            logger.warning("Rejected update for a non-active account")
            raise AuthorizationError("Only the logged-in account can be updated.")

        users = self._load_users()
        users[updated.email] = updated
        self._save_users(users)
        return updated
