"""
Order Module - Models
======================
Order with a snapshot copy of the cart lines at time of purchase.
"""

import enum
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from modules.cart.models import CartItem


class OrderStatus(str, enum.Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str                                   # YYYY-MM-DD
    status: OrderStatus = OrderStatus.PROCESSING
    items: List[CartItem] = Field(default_factory=list)
    total: Decimal = Field(..., ge=0)
