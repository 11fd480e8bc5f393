"""
Catalog Module - Models
========================
Product: immutable catalog entry. Seed type doubles as the product category.
"""

import enum
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductType(str, enum.Enum):
    WHITE = "white"
    BLACK = "black"
    MIXED = "mixed"
    CUSTOM = "custom"


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: ProductType
    price: Decimal = Field(..., ge=0)
    description: str = ""
    long_description: str = ""
    image: str = ""
    rating: float = 0
    review_count: int = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    origin: str = ""
    growth_environment: str = ""

    @property
    def is_custom(self) -> bool:
        return self.type == ProductType.CUSTOM

    def __repr__(self):
        return f"<Product {self.id} ({self.type.value}) {self.price}>"
