"""
Order Module - Service Layer
===============================
Order placement from the active user's cart.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from common.exceptions import EmptyCartError, NoActiveUserError
from common.helpers import generate_id, today_iso
from modules.auth.service import IdentityStore
from modules.cart.service import CartStore
from modules.order.models import Order, OrderStatus
from modules.pricing.calculator import OrderTotals, calculate_totals
from modules.user.models import User

logger = logging.getLogger("seedhaven.order")


@dataclass
class PlacedOrder:
    order: Order
    user: User                                  # active user after the order was prepended
    totals: OrderTotals
    confirmation_html: Optional[str] = None


class OrderService:

    def totals_for(self, cart: CartStore) -> OrderTotals:
        return calculate_totals(cart.subtotal)

    def place_order(self, identity: IdentityStore, cart: CartStore, active: Optional[User]) -> PlacedOrder:
        """
        Commit an order from the current cart:
        1. Compute totals
        2. Snapshot the cart lines into a Processing order
        3. Prepend it to the user's orders (update_user)
        4. Clear the cart

        Raises:
            NoActiveUserError if nobody is logged in
            EmptyCartError if the cart has no lines
        """
        if active is None:
            raise NoActiveUserError("You must be logged in to place an order.")
        if not cart.items:
            raise EmptyCartError()

        totals = self.totals_for(cart)
        order = Order(
            id=generate_id("order"),
            date=today_iso(),
            status=OrderStatus.PROCESSING,
            items=cart.items,
            total=totals.total,
        )

        user = identity.update_user(active, active.model_copy(update={"orders": [order, *active.orders]}))
        cart.clear_cart()
        logger.info(f"Order {order.id} placed by {user.id}: {len(order.items)} lines, total {order.total}")
        return PlacedOrder(order=order, user=user, totals=totals)

    def get_orders(self, user: User) -> List[Order]:
        """Most recent first."""
        return list(user.orders)


# Singleton
order_service = OrderService()
