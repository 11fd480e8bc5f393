"""
Cart Module - Service Layer
==============================
Per-user cart: add/remove/update lines, derived count and subtotal.
The cart belongs to whichever user id it is switched to; without one,
changes are kept in memory only.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from common.exceptions import ValidationError
from common.helpers import generate_id
from modules.cart.models import CartItem, CartItemList, CustomComposition
from modules.catalog.models import Product
from modules.storage.service import LocalStorage, cart_key

logger = logging.getLogger("seedhaven.cart")


class CartStore:

    def __init__(self, storage: LocalStorage, user_id: Optional[str] = None):
        self.storage = storage
        self.user_id: Optional[str] = None
        self._items: List[CartItem] = []
        self.switch_user(user_id)

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    def find_item(self, item_id: str) -> Optional[CartItem]:
        return next((it for it in self._items if it.id == item_id), None)

    def switch_user(self, user_id: Optional[str]):
        """
        Follow the active user. Loading a user restores their persisted cart;
        switching to None empties the in-memory view and leaves storage alone.
        """
        self.user_id = user_id
        if user_id:
            self._items = self.storage.read_typed(cart_key(user_id), CartItemList, [])
        else:
            self._items = []

    # ==========================================
    # Mutations
    # ==========================================

    def add_to_cart(
        self, product: Product, quantity: int = 1,
        composition: Optional[CustomComposition] = None,
    ) -> CartItem:
        """
        Custom packs always become a new line with a fresh id.
        Other products merge into the existing line for the same product id.
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be at least 1.")

        if product.is_custom:
            if composition is None:
                raise ValidationError("A custom pack needs a seed composition.")
            if composition.white + composition.black == 0:
                raise ValidationError("A custom pack needs at least one seed.")
            line = CartItem.from_product(
                product, quantity, composition, id=generate_id("custom"),
            )
            self._commit([*self._items, line])
            return line

        existing = next(
            (it for it in self._items if it.id == product.id and not it.is_custom), None,
        )
        if existing:
            line = existing.model_copy(update={"quantity": existing.quantity + quantity})
            self._commit([line if it is existing else it for it in self._items])
        else:
            line = CartItem.from_product(product, quantity)
            self._commit([*self._items, line])
        return line

    def remove_from_cart(self, item_id: str):
        self._commit([it for it in self._items if it.id != item_id])

    def update_quantity(self, item_id: str, quantity: int):
        """Set a line's quantity (floored at 0). Lines that reach 0 are dropped."""
        quantity = max(0, quantity)
        updated = [
            it.model_copy(update={"quantity": quantity}) if it.id == item_id else it
            for it in self._items
        ]
        self._commit([it for it in updated if it.quantity > 0])

    def clear_cart(self):
        """Empty the cart and delete the persisted copy."""
        self._items = []
        if self.user_id:
            self.storage.remove_item(cart_key(self.user_id))

    # ==========================================
    # Derived values
    # ==========================================

    @property
    def item_count(self) -> int:
        return sum(it.quantity for it in self._items)

    @property
    def subtotal(self) -> Decimal:
        return sum((it.line_total for it in self._items), Decimal("0"))

    def summary(self) -> dict:
        return {
            "items": [it.model_dump(mode="json") for it in self._items],
            "item_count": self.item_count,
            "subtotal": str(self.subtotal),
        }

    # ==========================================
    # Private helpers
    # ==========================================

    def _commit(self, items: List[CartItem]):
        self._items = items
        if self.user_id:
            self.storage.write_typed(cart_key(self.user_id), CartItemList, items)
        else:
            logger.debug("No active user, cart change kept in memory only")
