"""Product Catalog.

Provides catalog entities, request validation, response assembly, the
repository capabilities with their SQLAlchemy and in-memory implementations,
and the query/category services built on them.
"""

from catalog_api.catalog.assembler import prepare_response
from catalog_api.catalog.memory import (
    InMemoryCatalog,
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)
from catalog_api.catalog.models import Category, Product, ProductVariant
from catalog_api.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SearchFilters,
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)
from catalog_api.catalog.schemas import CatalogResponse, ProductSchema, VariantSchema
from catalog_api.catalog.service import CatalogQueryService, CategoryService, CategorySummary
from catalog_api.catalog.validators import validate_product_code, validate_product_filters

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductVariant",
    # Validation
    "SearchFilters",
    "validate_product_code",
    "validate_product_filters",
    # Assembly
    "CatalogResponse",
    "ProductSchema",
    "VariantSchema",
    "prepare_response",
    # Repositories
    "CategoryRepository",
    "ProductRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
    "InMemoryCatalog",
    "InMemoryCategoryRepository",
    "InMemoryProductRepository",
    # Services
    "CatalogQueryService",
    "CategoryService",
    "CategorySummary",
]
