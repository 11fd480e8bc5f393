"""
Order Module - Checkout Flow
==============================
Shipping → Payment → Review → Placed.
Any earlier step can be revisited; placing is only possible from Review and
ends the flow. Form fields are only checked for presence. Payment details
live on the flow object and are never persisted.
"""

import enum
import logging
from typing import Dict, Optional

from common.exceptions import CheckoutStateError, ValidationError
from common.helpers import is_blank
from modules.auth.service import IdentityStore
from modules.cart.service import CartStore
from modules.notification.service import OrderSummarizer, build_confirmation_email
from modules.order.service import OrderService, PlacedOrder, order_service
from modules.pricing.calculator import OrderTotals
from modules.user.models import User

logger = logging.getLogger("seedhaven.order")

SHIPPING_FIELDS = ("full_name", "address", "city", "state", "zip")
PAYMENT_FIELDS = ("card_number", "name_on_card", "expiry", "cvc")


class CheckoutStep(int, enum.Enum):
    SHIPPING = 1
    PAYMENT = 2
    REVIEW = 3
    PLACED = 4


def _collect(form: Dict[str, str], fields) -> Dict[str, str]:
    missing = [f for f in fields if is_blank(form.get(f))]
    if missing:
        raise ValidationError(f"Required: {', '.join(missing)}")
    return {f: str(form[f]).strip() for f in fields}


class CheckoutFlow:

    def __init__(
        self,
        identity: IdentityStore,
        cart: CartStore,
        active: Optional[User],
        summarizer: Optional[OrderSummarizer] = None,
        orders: OrderService = order_service,
    ):
        self.identity = identity
        self.cart = cart
        self.active = active
        self.summarizer = summarizer
        self.orders = orders
        self.step = CheckoutStep.SHIPPING
        self.shipping: Dict[str, str] = {}
        self.payment: Dict[str, str] = {}
        self.placed: Optional[PlacedOrder] = None

    @property
    def totals(self) -> OrderTotals:
        return self.orders.totals_for(self.cart)

    def _require_step(self, step: CheckoutStep):
        if self.step != step:
            raise CheckoutStateError(f"Checkout is at {self.step.name.lower()}, not {step.name.lower()}.")

    def submit_shipping(self, form: Dict[str, str]):
        self._require_step(CheckoutStep.SHIPPING)
        self.shipping = _collect(form, SHIPPING_FIELDS)
        self.step = CheckoutStep.PAYMENT

    def submit_payment(self, form: Dict[str, str]):
        self._require_step(CheckoutStep.PAYMENT)
        self.payment = _collect(form, PAYMENT_FIELDS)
        self.step = CheckoutStep.REVIEW

    def back_to(self, step: CheckoutStep):
        if self.step == CheckoutStep.PLACED:
            raise CheckoutStateError("Order already placed.")
        if step >= self.step:
            raise CheckoutStateError("Can only go back to an earlier step.")
        self.step = step

    async def place(self) -> PlacedOrder:
        """
        Commit the order, then generate the confirmation email.
        The order and the cart clear are done before the email is requested,
        so a slow or failed email never affects them.
        """
        self._require_step(CheckoutStep.REVIEW)
        placed = self.orders.place_order(self.identity, self.cart, self.active)
        self.active = placed.user
        self.step = CheckoutStep.PLACED
        self.payment = {}
        self.placed = placed

        placed.confirmation_html = await build_confirmation_email(placed.order, placed.user, self.summarizer)
        return placed
