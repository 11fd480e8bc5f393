"""
Checkout & Order Routes
=========================
Totals preview, order placement and order history.
"""

from typing import Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from common.exceptions import (
    CheckoutStateError, EmptyCartError, NoActiveUserError, ValidationError, raise_http,
)
from modules.auth.deps import (
    get_cart, get_current_active_user, get_identity_store, get_storage, get_summarizer, require_login,
)
from modules.auth.service import IdentityStore
from modules.cart.service import CartStore
from modules.notification.service import OrderSummarizer
from modules.order.checkout import CheckoutFlow
from modules.order.service import order_service
from modules.storage.service import LocalStorage
from modules.user.models import User

router = APIRouter(prefix="/api", tags=["checkout"])


class PlaceOrderRequest(BaseModel):
    shipping: Dict[str, str]
    payment: Dict[str, str]


@router.get("/checkout/totals")
async def checkout_totals(cart: CartStore = Depends(get_cart)):
    return {"item_count": cart.item_count, **order_service.totals_for(cart).as_dict()}


@router.post("/checkout/place", status_code=201)
async def place_order(
    body: PlaceOrderRequest,
    storage: LocalStorage = Depends(get_storage),
    identity: IdentityStore = Depends(get_identity_store),
    user: Optional[User] = Depends(get_current_active_user),
    summarizer: OrderSummarizer = Depends(get_summarizer),
):
    cart = CartStore(storage, user.id if user else None)
    flow = CheckoutFlow(identity, cart, user, summarizer)
    try:
        flow.submit_shipping(body.shipping)
        flow.submit_payment(body.payment)
        placed = await flow.place()
    except NoActiveUserError as e:
        raise_http(e, 401)
    except (ValidationError, EmptyCartError, CheckoutStateError) as e:
        raise_http(e, 400)

    return {
        "order": placed.order.model_dump(mode="json"),
        "totals": placed.totals.as_dict(),
        "confirmation_html": placed.confirmation_html,
    }


@router.get("/orders")
async def my_orders(user: User = Depends(require_login)):
    return {"orders": [o.model_dump(mode="json") for o in order_service.get_orders(user)]}
