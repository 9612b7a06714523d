"""Catalog services.

Orchestrate repository calls for product queries and category management.
Services trust their inputs (validation happens at the API boundary) and do
not catch or reinterpret repository errors.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SearchFilters,
)
from catalog_api.domain.exceptions import ValidationError

logger = structlog.get_logger()


class CatalogQueryService:
    """Read operations over the product catalog.

    Example usage:
        service = CatalogQueryService(SqlAlchemyProductRepository(session))
        products = await service.list(validate_product_filters("0", "20", "", "shoes"))
    """

    def __init__(self, repository: ProductRepository) -> None:
        """Initialize service with a product repository.

        Args:
            repository: Product storage capability.
        """
        self.repository = repository

    async def list(self, filters: SearchFilters) -> Sequence[Product]:
        """List one page of products.

        Args:
            filters: Validated search filters.

        Returns:
            Matching products ordered by ID; empty when nothing matches.
        """
        products = await self.repository.list(filters)
        logger.debug(
            "Products listed",
            offset=filters.offset,
            limit=filters.limit,
            category=filters.category,
            price_less_than=(
                str(filters.price_less_than) if filters.price_less_than is not None else None
            ),
            count=len(products),
        )
        return products

    async def get_by_code(self, code: str) -> Product:
        """Get a product by its validated code.

        A code that matches nothing yields a zero-valued product rather than
        an error, so the detail response keeps its shape.

        Args:
            code: Product code that already passed format validation.

        Returns:
            The product, or Product.blank() if none matches.
        """
        product = await self.repository.get_by_code(code)
        if product is None:
            logger.info("Product not found", code=code)
            return Product.blank()
        return product

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get a product by ID, or None if absent."""
        return await self.repository.get_by_id(product_id)

    async def list_all(self) -> Sequence[Product]:
        """List every product ordered by ID."""
        return await self.repository.list_all()

    async def list_by_category(self, category_code: str) -> Sequence[Product]:
        """List every product in a category."""
        return await self.repository.get_by_category(category_code)


@dataclass
class CategorySummary:
    """Category code and name."""

    code: str
    name: str


class CategoryService:
    """Category listing and creation."""

    def __init__(self, repository: CategoryRepository) -> None:
        """Initialize service with a category repository.

        Args:
            repository: Category storage capability.
        """
        self.repository = repository

    async def list(self) -> Sequence[CategorySummary]:
        """List every category in store order."""
        categories = await self.repository.list_all()
        return [CategorySummary(code=c.code, name=c.name) for c in categories]

    async def create(self, code: str, name: str) -> Category:
        """Create a category.

        Args:
            code: Unique category code.
            name: Display name.

        Returns:
            The created category.

        Raises:
            ValidationError: If code or name is empty.
            CategoryCodeExistsError: If the code is already taken.
        """
        if not code or not name:
            raise ValidationError(
                "Code and name are required",
                details={"code": code, "name": name},
            )

        category = await self.repository.create(code, name)
        logger.info("Category created", code=code)
        return category

    async def get_name(self, code: str) -> str:
        """Get a category's name by code, or "" if absent."""
        category = await self.repository.get_by_code(code)
        return category.name if category is not None else ""

    async def list_products(self, code: str) -> Sequence[Product]:
        """List the products of a category; empty if the category is absent."""
        return await self.repository.get_products(code)
