"""
Catalog Module - Product Data
===============================
The fixed catalog. Defined once at import time and never mutated.
"""

from decimal import Decimal

from modules.catalog.models import Product, ProductType


PRODUCTS = (
    Product(
        id="p1",
        name="Individual White Seed",
        type=ProductType.WHITE,
        price=Decimal("1.50"),
        description="A single, pristine white seed.",
        long_description=(
            "Our signature white seed, known for its rapid growth and beautiful blossoms. "
            "Sourced ethically and guaranteed to sprout."
        ),
        image="/static/products/white-seed.jpg",
        rating=4.8,
        review_count=120,
        stock=500,
        origin="Himalayan Highlands",
        growth_environment="Indoor/Outdoor, moderate sunlight",
    ),
    Product(
        id="p2",
        name="Individual Black Seed",
        type=ProductType.BLACK,
        price=Decimal("1.75"),
        description="A single, lustrous black seed.",
        long_description=(
            "A rare and beautiful black seed that produces stunning dark foliage. "
            "Perfect for creating contrast in your garden."
        ),
        image="/static/products/black-seed.jpg",
        rating=4.9,
        review_count=150,
        stock=450,
        origin="Volcanic Plains of Andes",
        growth_environment="Outdoor, full sun",
    ),
    Product(
        id="p3",
        name="White Seed Pack (x10)",
        type=ProductType.WHITE,
        price=Decimal("12.00"),
        description="A pack of 10 pristine white seeds.",
        long_description=(
            "Get a head start on your garden with this value pack of 10 white seeds. "
            "Ideal for larger pots or garden beds."
        ),
        image="/static/products/white-pack.jpg",
        rating=4.7,
        review_count=80,
        stock=100,
        origin="Himalayan Highlands",
        growth_environment="Indoor/Outdoor, moderate sunlight",
    ),
    Product(
        id="p4",
        name="Black Seed Pack (x10)",
        type=ProductType.BLACK,
        price=Decimal("14.50"),
        description="A pack of 10 lustrous black seeds.",
        long_description=(
            "A full pack of our exotic black seeds. Create a dramatic and elegant garden "
            "display with this 10-seed collection."
        ),
        image="/static/products/black-pack.jpg",
        rating=4.9,
        review_count=95,
        stock=90,
        origin="Volcanic Plains of Andes",
        growth_environment="Outdoor, full sun",
    ),
    Product(
        id="p5",
        name="Mixed Seed Pack (5+5)",
        type=ProductType.MIXED,
        price=Decimal("13.50"),
        description="A balanced pack of 5 white & 5 black seeds.",
        long_description=(
            "The best of both worlds. This mixed pack contains 5 white and 5 black seeds, "
            "perfect for creating beautiful patterns and experiencing both varieties. "
            "Grown with care in our partner School Gardens."
        ),
        image="/static/products/mixed-pack.jpg",
        rating=4.8,
        review_count=210,
        stock=120,
        origin="Partner School Gardens",
        growth_environment="Varies, see individual seed info",
    ),
)
