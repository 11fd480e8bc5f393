"""
Catalog Module - Service Layer
================================
Read-only access to the fixed product catalog: listing with filter/sort,
lookup by id, related products.
"""

from typing import Iterable, List, Optional

from common.exceptions import NotFoundError
from modules.catalog.data import PRODUCTS
from modules.catalog.models import Product, ProductType

SORT_POPULARITY = "popularity"
SORT_PRICE_ASC = "price-asc"
SORT_PRICE_DESC = "price-desc"
SORT_RATING = "rating"

_SORT_KEYS = {
    SORT_PRICE_ASC: (lambda p: p.price, False),
    SORT_PRICE_DESC: (lambda p: p.price, True),
    SORT_RATING: (lambda p: p.rating, True),
    SORT_POPULARITY: (lambda p: p.review_count, True),
}


class CatalogService:

    def __init__(self, products: Iterable[Product] = PRODUCTS):
        self.products = tuple(products)

    def list_products(self, type_filter: str = "all", sort: str = SORT_POPULARITY) -> List[Product]:
        """
        Filter by seed type ('all' keeps everything) and sort.
        Unknown sort keys fall back to popularity (review count, descending).
        """
        items = list(self.products)
        if type_filter and type_filter != "all":
            items = [p for p in items if p.type.value == type_filter]

        key, reverse = _SORT_KEYS.get(sort, _SORT_KEYS[SORT_POPULARITY])
        return sorted(items, key=key, reverse=reverse)

    def find_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self.products if p.id == product_id), None)

    def get_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        if not product:
            raise NotFoundError(f"Product '{product_id}' not found.")
        return product

    def first_of_type(self, product_type: ProductType) -> Optional[Product]:
        return next((p for p in self.products if p.type == product_type), None)

    def related_products(self, product: Product, limit: int = 4) -> List[Product]:
        """Other products of the same seed type."""
        return [p for p in self.products if p.type == product.type and p.id != product.id][:limit]


# Singleton
catalog_service = CatalogService()
