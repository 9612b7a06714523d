"""Sample catalog data.

A small fixed catalog used by the seed script and by tests. Variants priced
at zero inherit the price of their product.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import Category, Product, ProductVariant

# (code, name)
CATEGORIES: list[tuple[str, str]] = [
    ("clothing", "Clothing"),
    ("shoes", "Shoes"),
    ("accessories", "Accessories"),
]

# (code, price, category code, [(variant name, sku suffix, variant price)])
PRODUCTS: list[tuple[str, str, str, list[tuple[str, str, str]]]] = [
    ("PROD001", "10.99", "clothing", [
        ("Variant A", "A", "11.99"),
        ("Variant B", "B", "0"),
        ("Variant C", "C", "12.49"),
    ]),
    ("PROD002", "12.49", "shoes", [
        ("Variant A", "A", "0"),
        ("Variant B", "B", "13.49"),
    ]),
    ("PROD003", "8.75", "accessories", [
        ("Variant A", "A", "0"),
    ]),
    ("PROD004", "15.00", "clothing", []),
    ("PROD005", "20.50", "shoes", [
        ("Variant A", "A", "0"),
        ("Variant B", "B", "21.50"),
    ]),
    ("PROD006", "5.99", "accessories", [
        ("Variant A", "A", "6.49"),
    ]),
    ("PROD007", "100.50", "clothing", [
        ("Medium", "M", "0"),
        ("Large", "L", "120.00"),
    ]),
    ("PROD008", "7.25", "accessories", []),
]


def build_categories() -> dict[str, Category]:
    """Build the sample categories keyed by code."""
    return {code: Category(code=code, name=name) for code, name in CATEGORIES}


def _build_product(
    code: str,
    price: str,
    variants: list[tuple[str, str, str]],
    **fields: Any,
) -> Product:
    return Product(
        code=code,
        price=Decimal(price),
        variants=[
            ProductVariant(
                name=name,
                sku=f"{code}-{suffix}",
                price=Decimal(variant_price),
            )
            for name, suffix, variant_price in variants
        ],
        **fields,
    )


def build_catalog() -> tuple[list[Category], list[Product]]:
    """Build transient sample categories and products.

    Returns:
        Tuple of (categories, products), products in code order.
    """
    categories = build_categories()
    products = [
        _build_product(code, price, variants, category=categories[category_code])
        for code, price, category_code, variants in PRODUCTS
    ]
    return list(categories.values()), products


async def seed_catalog(session: AsyncSession, clear_existing: bool = True) -> dict[str, Any]:
    """Load the sample catalog into the database.

    Products are inserted in code order, so their IDs follow PROD001..PROD008.

    Args:
        session: Async SQLAlchemy session.
        clear_existing: Whether to delete existing catalog rows first.

    Returns:
        Seeding result with counts.
    """
    deleted = 0
    if clear_existing:
        await session.execute(delete(ProductVariant))
        deleted_rows = await session.execute(delete(Product))
        deleted = deleted_rows.rowcount or 0
        await session.execute(delete(Category))

    categories = build_categories()
    session.add_all(categories.values())
    await session.flush()

    # Linked by category_id: cascading through Category.products would
    # insert products grouped by category.
    products = [
        _build_product(code, price, variants, category_id=categories[category_code].id)
        for code, price, category_code, variants in PRODUCTS
    ]
    session.add_all(products)

    result = {
        "deleted": deleted,
        "categories_created": len(categories),
        "products_created": len(products),
        "variants_created": sum(len(p.variants) for p in products),
    }

    await session.commit()

    return result
