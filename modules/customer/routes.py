"""
Profile Routes
================
Profile view, address book and saved payment methods.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from common.exceptions import ValidationError, raise_http
from modules.auth.deps import get_identity_store, require_login
from modules.auth.service import IdentityStore
from modules.customer.service import CustomerService, describe_payment_method
from modules.user.models import User

router = APIRouter(prefix="/api/profile", tags=["profile"])


class AddressRequest(BaseModel):
    street: str
    city: str
    state: str
    zip: str
    country: str = "USA"


class PaymentMethodRequest(BaseModel):
    type: Literal["Credit Card", "Checking Account"]
    card_number: Optional[str] = None
    expiry: Optional[str] = None
    account_number: Optional[str] = None
    routing_number: Optional[str] = None


def _profile(user: User) -> dict:
    data = user.public_dict()
    data["has_password"] = user.has_password
    data["address_labels"] = [a.one_line() for a in user.addresses]
    data["payment_method_labels"] = [describe_payment_method(pm) for pm in user.payment_methods]
    return data


@router.get("")
async def profile(me: User = Depends(require_login)):
    return _profile(me)


@router.post("/addresses", status_code=201)
async def add_address(
    body: AddressRequest,
    me: User = Depends(require_login),
    identity: IdentityStore = Depends(get_identity_store),
):
    try:
        user = CustomerService(identity).add_address(
            me, body.street, body.city, body.state, body.zip, body.country,
        )
    except ValidationError as e:
        raise_http(e, 400)
    return _profile(user)


@router.post("/payment-methods", status_code=201)
async def add_payment_method(
    body: PaymentMethodRequest,
    me: User = Depends(require_login),
    identity: IdentityStore = Depends(get_identity_store),
):
    service = CustomerService(identity)
    try:
        if body.type == "Credit Card":
            user = service.add_credit_card(me, body.card_number or "", body.expiry or "")
        else:
            user = service.add_checking_account(me, body.account_number or "", body.routing_number or "")
    except ValidationError as e:
        raise_http(e, 400)
    return _profile(user)
