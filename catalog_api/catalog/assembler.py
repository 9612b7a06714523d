"""Response assembly for catalog queries.

Maps product entities to response schemas, resolving variant prices and
counting purchasable variants.
"""

from collections.abc import Sequence
from decimal import Decimal

from catalog_api.catalog.models import Product, ProductVariant
from catalog_api.catalog.schemas import CatalogResponse, ProductSchema, VariantSchema


def product_to_schema(product: Product) -> ProductSchema:
    """Convert a Product entity to its response schema.

    Missing fields (as on a zero-valued product) render as their zero values.
    """
    return ProductSchema(
        code=product.code or "",
        price=float(product.price or 0),
        category=product.category.name if product.category is not None else "",
    )


def variant_to_schema(variant: ProductVariant, parent_price: Decimal) -> VariantSchema:
    """Convert a variant to its response schema with the effective price."""
    return VariantSchema(
        id=variant.id,
        name=variant.name,
        sku=variant.sku,
        price=float(variant.resolve_price(parent_price)),
        product_id=variant.product_id,
    )


def prepare_response(
    products: Sequence[Product],
    include_variants: bool = False,
) -> CatalogResponse:
    """Assemble the catalog response for a set of products.

    products_available counts variants, not products: every variant is a
    distinct sellable unit. Only the variants of the first product are
    emitted, since include_variants is used by the single-product detail view.

    Args:
        products: Products in result order.
        include_variants: Whether to emit the first product's variants.

    Returns:
        CatalogResponse. ``variants`` is None unless include_variants is set
        and at least one product is present.
    """
    response = CatalogResponse(
        products=[product_to_schema(p) for p in products],
        products_available=sum(len(p.variants) for p in products),
    )

    if include_variants and products:
        first = products[0]
        parent_price = first.price if first.price is not None else Decimal("0")
        response.variants = [
            variant_to_schema(variant, parent_price) for variant in first.variants
        ]

    return response
