"""
Catalog Routes
================
Product listing, product detail and custom pack quotes.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import CUSTOM_PACK_DEFAULT
from common.exceptions import NotFoundError, raise_http
from modules.catalog.service import catalog_service, SORT_POPULARITY
from modules.pricing.calculator import CustomPackComposer

router = APIRouter(prefix="/api", tags=["catalog"])


class CustomPackRequest(BaseModel):
    white: int = CUSTOM_PACK_DEFAULT
    black: int = CUSTOM_PACK_DEFAULT


@router.get("/products")
async def list_products(filter: str = "all", sort: str = SORT_POPULARITY):
    products = catalog_service.list_products(filter, sort)
    return {"products": [p.model_dump(mode="json") for p in products]}


@router.get("/products/{product_id}")
async def product_detail(product_id: str):
    try:
        product = catalog_service.get_product(product_id)
    except NotFoundError as e:
        raise_http(e, 404)
    related = catalog_service.related_products(product)
    return {
        "product": product.model_dump(mode="json"),
        "related": [p.model_dump(mode="json") for p in related],
    }


@router.post("/custom-pack/quote")
async def custom_pack_quote(body: CustomPackRequest):
    composer = CustomPackComposer(body.white, body.black)
    return {
        "composition": composer.composition().model_dump(),
        "product": composer.build().model_dump(mode="json"),
    }
