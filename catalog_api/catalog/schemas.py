"""Catalog response schemas.

Pydantic models for the product listing and product detail responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProductSchema(BaseModel):
    """Product as exposed by the catalog endpoints."""

    code: str = Field(..., description="Product code (e.g., PROD001)")
    price: float = Field(..., description="Product price")
    category: str = Field(..., description="Category display name")


class VariantSchema(BaseModel):
    """Product variant with its effective price."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, description="Variant identifier")
    name: str = Field(..., description="Variant name")
    sku: str = Field(..., description="Stock keeping unit")
    price: float = Field(..., description="Effective price, inherited from the product when unset")
    product_id: int | None = Field(
        default=None,
        alias="productId",
        description="Owning product identifier",
    )


class CatalogResponse(BaseModel):
    """Catalog listing or product detail response."""

    products: list[ProductSchema] = Field(..., description="Products in the result")
    products_available: int = Field(
        ..., description="Number of purchasable variants across all products"
    )
    variants: list[VariantSchema] | None = Field(
        default=None,
        description="Variants of the first product (detail view only)",
    )
