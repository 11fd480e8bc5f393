"""
Cart Routes
=============
Cart view and line updates. A cart belongs to an account, so every route
requires a logged-in user.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from config.settings import CUSTOM_PACK_DEFAULT
from common.exceptions import NotFoundError, ValidationError, raise_http
from modules.auth.deps import get_cart
from modules.cart.service import CartStore
from modules.catalog.service import catalog_service
from modules.pricing.calculator import CustomPackComposer

router = APIRouter(prefix="/api/cart", tags=["cart"])


# ==========================================
# Schemas
# ==========================================

class AddItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, gt=0)


class AddCustomPackRequest(BaseModel):
    white: int = CUSTOM_PACK_DEFAULT
    black: int = CUSTOM_PACK_DEFAULT
    quantity: int = Field(1, gt=0)


class UpdateQuantityRequest(BaseModel):
    quantity: int


# ==========================================
# Endpoints
# ==========================================

@router.get("")
async def view_cart(cart: CartStore = Depends(get_cart)):
    return cart.summary()


@router.post("/items")
async def add_item(body: AddItemRequest, cart: CartStore = Depends(get_cart)):
    try:
        product = catalog_service.get_product(body.product_id)
        cart.add_to_cart(product, body.quantity)
    except NotFoundError as e:
        raise_http(e, 404)
    except ValidationError as e:
        raise_http(e, 400)
    return cart.summary()


@router.post("/custom")
async def add_custom_pack(body: AddCustomPackRequest, cart: CartStore = Depends(get_cart)):
    composer = CustomPackComposer(body.white, body.black)
    try:
        cart.add_to_cart(composer.build(), body.quantity, composer.composition())
    except ValidationError as e:
        raise_http(e, 400)
    return cart.summary()


@router.patch("/items/{item_id}")
async def update_item(item_id: str, body: UpdateQuantityRequest, cart: CartStore = Depends(get_cart)):
    if not cart.find_item(item_id):
        raise_http(NotFoundError("Cart line not found."), 404)
    cart.update_quantity(item_id, body.quantity)
    return cart.summary()


@router.delete("/items/{item_id}")
async def remove_item(item_id: str, cart: CartStore = Depends(get_cart)):
    cart.remove_from_cart(item_id)
    return cart.summary()


@router.delete("")
async def clear_cart(cart: CartStore = Depends(get_cart)):
    cart.clear_cart()
    return cart.summary()
