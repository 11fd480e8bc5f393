"""
Auth Routes
=============
Signup, password login, external-identity login, logout, current user.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from common.exceptions import (
    AuthenticationError, DuplicateError, InvalidAssertionError, ValidationError, raise_http,
)
from modules.auth.deps import get_identity_store, get_current_active_user
from modules.auth.service import IdentityStore
from modules.user.models import User

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==========================================
# Schemas
# ==========================================

class SignupRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)
    confirm_password: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class ExternalLoginRequest(BaseModel):
    credential: str


# ==========================================
# Endpoints
# ==========================================

@router.post("/signup", status_code=201)
async def signup(body: SignupRequest, identity: IdentityStore = Depends(get_identity_store)):
    try:
        user = identity.signup(body.name, body.email, body.password, body.confirm_password)
    except DuplicateError as e:
        raise_http(e, 409)
    except ValidationError as e:
        raise_http(e, 400)
    return {"success": True, "user": user.public_dict()}


@router.post("/login")
async def login(body: LoginRequest, identity: IdentityStore = Depends(get_identity_store)):
    try:
        user = identity.login(body.email, body.password)
    except AuthenticationError as e:
        raise_http(e, 401)
    return {"success": True, "user": user.public_dict()}


@router.post("/external")
async def external_login(body: ExternalLoginRequest, identity: IdentityStore = Depends(get_identity_store)):
    try:
        user = identity.login_with_external_identity(body.credential)
    except InvalidAssertionError as e:
        raise_http(e, 400)
    return {"success": True, "user": user.public_dict()}


@router.post("/logout")
async def logout(identity: IdentityStore = Depends(get_identity_store)):
    identity.logout()
    return {"success": True}


@router.get("/me")
async def me(user: Optional[User] = Depends(get_current_active_user)):
    return {"authenticated": user is not None, "user": user.public_dict() if user else None}
