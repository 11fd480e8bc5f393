"""
Pricing Module - Calculator
=============================
Custom seed pack pricing and checkout totals.
Pure arithmetic, no persistence.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from config.settings import (
    SHIPPING_FEE, TAX_RATE,
    CUSTOM_PACK_MIN, CUSTOM_PACK_MAX, CUSTOM_PACK_DEFAULT,
    FALLBACK_WHITE_PRICE, FALLBACK_BLACK_PRICE,
)
from modules.cart.models import CustomComposition
from modules.catalog.models import Product, ProductType
from modules.catalog.service import CatalogService, catalog_service


# ==========================================
# Checkout totals
# ==========================================

@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def as_dict(self) -> dict:
        return {k: str(v) for k, v in vars(self).items()}


def calculate_totals(subtotal: Decimal) -> OrderTotals:
    """total = subtotal + flat shipping + subtotal × tax rate (exact, unrounded)."""
    subtotal = Decimal(subtotal)
    tax = subtotal * TAX_RATE
    return OrderTotals(
        subtotal=subtotal,
        shipping=SHIPPING_FEE,
        tax=tax,
        total=subtotal + SHIPPING_FEE + tax,
    )


# ==========================================
# Custom pack
# ==========================================

def clamp_seed_count(value: int) -> int:
    return max(CUSTOM_PACK_MIN, min(CUSTOM_PACK_MAX, int(value)))


def calculate_custom_pack_price(
    white: int, black: int,
    white_price: Decimal = FALLBACK_WHITE_PRICE,
    black_price: Decimal = FALLBACK_BLACK_PRICE,
) -> Decimal:
    return white * Decimal(white_price) + black * Decimal(black_price)


class CustomPackComposer:
    """
    Holds the two seed counts of a custom pack and prices them against the
    first white and first black products in the catalog.
    """

    def __init__(
        self, white: int = CUSTOM_PACK_DEFAULT, black: int = CUSTOM_PACK_DEFAULT,
        catalog: Optional[CatalogService] = None,
    ):
        self.catalog = catalog or catalog_service
        self.white = clamp_seed_count(white)
        self.black = clamp_seed_count(black)

    def set_white(self, count: int):
        self.white = clamp_seed_count(count)

    def set_black(self, count: int):
        self.black = clamp_seed_count(count)

    @property
    def white_price(self) -> Decimal:
        product = self.catalog.first_of_type(ProductType.WHITE)
        return product.price if product else FALLBACK_WHITE_PRICE

    @property
    def black_price(self) -> Decimal:
        product = self.catalog.first_of_type(ProductType.BLACK)
        return product.price if product else FALLBACK_BLACK_PRICE

    @property
    def price(self) -> Decimal:
        return calculate_custom_pack_price(self.white, self.black, self.white_price, self.black_price)

    def composition(self) -> CustomComposition:
        return CustomComposition(white=self.white, black=self.black)

    def build(self) -> Product:
        """The transient product handed to CartStore.add_to_cart."""
        return Product(
            id="custom",
            name="Custom Seed Pack",
            type=ProductType.CUSTOM,
            price=self.price,
            description=f"{self.white} White, {self.black} Black",
            long_description=(
                f"A custom-built pack containing {self.white} white seeds "
                f"and {self.black} black seeds, selected by you."
            ),
            image="/static/products/custom-pack.jpg",
            rating=5,
            review_count=0,
            stock=1000,
            origin="Your Imagination",
            growth_environment="Mixed",
        )
