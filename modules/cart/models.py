"""
Cart Module - Models
=====================
CartItem: a product snapshot plus quantity, and for custom packs the
white/black seed composition.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from modules.catalog.models import Product


class CustomComposition(BaseModel):
    model_config = ConfigDict(frozen=True)

    white: int = Field(0, ge=0)
    black: int = Field(0, ge=0)


class CartItem(Product):
    quantity: int = Field(..., gt=0)
    custom_composition: Optional[CustomComposition] = None

    @classmethod
    def from_product(
        cls, product: Product, quantity: int,
        composition: Optional[CustomComposition] = None, **overrides,
    ) -> "CartItem":
        data = product.model_dump()
        data.update(overrides)
        return cls(**data, quantity=quantity, custom_composition=composition)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


# Typed decoder for the persisted cart (JSON array of CartItem)
CartItemList = TypeAdapter(List[CartItem])
