"""
Auth Module - Dependencies
===========================
FastAPI dependencies wiring the stores to a request.
These are injected into route handlers via Depends().
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from config.database import get_db
from modules.auth.service import IdentityStore
from modules.cart.service import CartStore
from modules.notification.service import GeminiSummarizer, OrderSummarizer
from modules.storage.service import LocalStorage
from modules.user.models import User


def get_storage(db: Session = Depends(get_db)) -> LocalStorage:
    return LocalStorage(db)


def get_identity_store(storage: LocalStorage = Depends(get_storage)) -> IdentityStore:
    return IdentityStore(storage)


def get_current_active_user(identity: IdentityStore = Depends(get_identity_store)) -> Optional[User]:
    """The account the active-user pointer refers to, or None."""
    return identity.restore()


def require_login(user: Optional[User] = Depends(get_current_active_user)) -> User:
    """Raises 401 if nobody is logged in."""
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="login_required")
    return user


def get_cart(
    storage: LocalStorage = Depends(get_storage),
    user: User = Depends(require_login),
) -> CartStore:
    return CartStore(storage, user.id)


def get_summarizer() -> OrderSummarizer:
    return GeminiSummarizer()
