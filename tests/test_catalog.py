import pytest

from common.exceptions import NotFoundError
from modules.catalog.service import catalog_service


def test_default_listing_is_by_popularity():
    ids = [p.id for p in catalog_service.list_products()]
    assert ids == ["p5", "p2", "p1", "p4", "p3"]


def test_filter_by_type():
    assert {p.id for p in catalog_service.list_products("white")} == {"p1", "p3"}
    assert [p.id for p in catalog_service.list_products("mixed")] == ["p5"]
    assert catalog_service.list_products("custom") == []


@pytest.mark.parametrize("sort, first", [
    ("price-asc", "p1"),
    ("price-desc", "p4"),
    ("bogus", "p5"),
])
def test_sorting(sort, first):
    assert catalog_service.list_products("all", sort)[0].id == first


def test_rating_sort_is_descending():
    ratings = [p.rating for p in catalog_service.list_products(sort="rating")]
    assert ratings == sorted(ratings, reverse=True)


def test_related_products_share_type():
    product = catalog_service.get_product("p2")
    assert [p.id for p in catalog_service.related_products(product)] == ["p4"]


def test_unknown_product():
    assert catalog_service.find_product("p99") is None
    with pytest.raises(NotFoundError):
        catalog_service.get_product("p99")
