from decimal import Decimal

from modules.catalog.data import PRODUCTS
from modules.catalog.models import ProductType
from modules.catalog.service import CatalogService
from modules.pricing.calculator import (
    CustomPackComposer, calculate_custom_pack_price, calculate_totals,
)


def test_custom_pack_price_uses_catalog_unit_prices():
    composer = CustomPackComposer(5, 3)
    assert composer.white_price == Decimal("1.50")
    assert composer.black_price == Decimal("1.75")
    assert composer.price == Decimal("12.75")


def test_custom_pack_falls_back_without_catalog_entries():
    mixed_only = CatalogService([p for p in PRODUCTS if p.type == ProductType.MIXED])
    composer = CustomPackComposer(2, 2, catalog=mixed_only)
    assert composer.price == Decimal("6.50")


def test_counts_are_clamped_to_bounds():
    composer = CustomPackComposer(-4, 80)
    assert (composer.white, composer.black) == (0, 50)
    composer.set_white(12)
    composer.set_black(-1)
    assert (composer.white, composer.black) == (12, 0)
    assert composer.price == Decimal("18.00")


def test_built_product_describes_both_counts():
    product = CustomPackComposer(7, 4).build()
    assert product.type == ProductType.CUSTOM
    assert product.description == "7 White, 4 Black"
    assert "7 white seeds" in product.long_description
    assert "4 black seeds" in product.long_description
    assert product.price == calculate_custom_pack_price(7, 4)


def test_totals_formula():
    totals = calculate_totals(Decimal("10.00"))
    assert totals.shipping == Decimal("5.00")
    assert totals.tax == Decimal("0.80")
    assert totals.total == Decimal("10.00") + Decimal("5.00") + Decimal("10.00") * Decimal("0.08")


def test_totals_of_empty_cart_is_shipping_only():
    assert calculate_totals(Decimal("0")).total == Decimal("5.00")


def test_reference_scenario_total():
    subtotal = Decimal("1.50") * 3 + CustomPackComposer(5, 3).price
    totals = calculate_totals(subtotal)
    assert totals.subtotal == Decimal("17.25")
    assert totals.tax == Decimal("1.38")
    assert totals.total == Decimal("23.63")
