"""Repositories for catalog persistence.

Declares the storage capabilities the catalog core depends on
(ProductRepository, CategoryRepository) and their SQLAlchemy implementations.

Contract shared by every implementation:
    - Queries that match nothing return an empty sequence or None, never raise.
    - Store failures are raised as InfrastructureError.
    - A duplicate category code on create is raised as CategoryCodeExistsError
      and leaves the existing category untouched.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal

import structlog
from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.catalog.models import Category, Product
from catalog_api.domain.exceptions import CategoryCodeExistsError, InfrastructureError

logger = structlog.get_logger()


@dataclass
class SearchFilters:
    """Bounded filter parameters for product listing.

    Attributes:
        offset: Number of products to skip (>= 0).
        limit: Maximum number of products to return (1..100).
        category: Category code to restrict to, if any.
        price_less_than: Exclusive price ceiling, if any.
    """

    offset: int = 0
    limit: int = 10
    category: str | None = None
    price_less_than: Decimal | None = None


# ============================================================================
# Capabilities
# ============================================================================


class ProductRepository(ABC):
    """Read access to products with their variants and category."""

    @abstractmethod
    async def list_all(self) -> Sequence[Product]:
        """Get every product ordered by ID."""
        ...

    @abstractmethod
    async def list(self, filters: SearchFilters) -> Sequence[Product]:
        """Get one page of products matching the filters.

        Products are ordered by ID ascending. Category and price filters
        combine with AND semantics.

        Args:
            filters: Pre-validated search filters.

        Returns:
            Matching products, possibly empty.
        """
        ...

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID, or None if absent."""
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Product | None:
        """Get product by code, or None if absent."""
        ...

    @abstractmethod
    async def get_by_category(self, category_code: str) -> Sequence[Product]:
        """Get every product in the category with the given code."""
        ...


class CategoryRepository(ABC):
    """Access to categories."""

    @abstractmethod
    async def list_all(self) -> Sequence[Category]:
        """Get every category in store order."""
        ...

    @abstractmethod
    async def create(self, code: str, name: str) -> Category:
        """Create a category.

        Raises:
            CategoryCodeExistsError: If the code is already taken.
        """
        ...

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Category | None:
        """Get category by ID, or None if absent."""
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Category | None:
        """Get category by code, or None if absent."""
        ...

    @abstractmethod
    async def get_products(self, code: str) -> Sequence[Product]:
        """Get the products of the category with the given code."""
        ...


# ============================================================================
# SQLAlchemy Implementations
# ============================================================================


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and SQLAlchemy failures as InfrastructureError.

    Args:
        operation: Repository operation name, for logs and error details.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        logger.error("Store operation failed", operation=operation, error=str(e))
        raise InfrastructureError(
            f"Store operation failed: {operation}",
            details={"operation": operation},
        ) from e


class SqlAlchemyProductRepository(ProductRepository):
    """ProductRepository backed by an async SQLAlchemy session.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlAlchemyProductRepository(session)
            products = await repo.list(SearchFilters(category="shoes", limit=20))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    def _base_query(self) -> Select[tuple[Product]]:
        return select(Product).options(
            selectinload(Product.variants),
            selectinload(Product.category),
        )

    async def list_all(self) -> Sequence[Product]:
        with translate_store_errors("products.list_all"):
            result = await self.session.execute(
                self._base_query().order_by(Product.id.asc())
            )
            return result.scalars().all()

    async def list(self, filters: SearchFilters) -> Sequence[Product]:
        query = self._base_query()

        if filters.category:
            query = query.join(Product.category).where(Category.code == filters.category)

        if filters.price_less_than is not None:
            query = query.where(Product.price < filters.price_less_than)

        query = query.order_by(Product.id.asc()).offset(filters.offset).limit(filters.limit)

        with translate_store_errors("products.list"):
            result = await self.session.execute(query)
            return result.scalars().all()

    async def get_by_id(self, product_id: int) -> Product | None:
        with translate_store_errors("products.get_by_id"):
            result = await self.session.execute(
                self._base_query().where(Product.id == product_id)
            )
            return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> Product | None:
        with translate_store_errors("products.get_by_code"):
            result = await self.session.execute(
                self._base_query().where(Product.code == code)
            )
            return result.scalar_one_or_none()

    async def get_by_category(self, category_code: str) -> Sequence[Product]:
        query = (
            self._base_query()
            .join(Product.category)
            .where(Category.code == category_code)
            .order_by(Product.id.asc())
        )
        with translate_store_errors("products.get_by_category"):
            result = await self.session.execute(query)
            return result.scalars().all()


class SqlAlchemyCategoryRepository(CategoryRepository):
    """CategoryRepository backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_all(self) -> Sequence[Category]:
        with translate_store_errors("categories.list_all"):
            result = await self.session.execute(
                select(Category).order_by(Category.id.asc())
            )
            return result.scalars().all()

    async def create(self, code: str, name: str) -> Category:
        """Insert and commit a new category.

        The unique constraint on code is the source of truth for conflicts;
        a violation rolls the transaction back before raising.
        """
        category = Category(code=code, name=name)
        with translate_store_errors("categories.create"):
            self.session.add(category)
            try:
                await self.session.flush()
            except IntegrityError as e:
                await self.session.rollback()
                raise CategoryCodeExistsError(code) from e
            await self.session.commit()
        return category

    async def get_by_id(self, category_id: int) -> Category | None:
        with translate_store_errors("categories.get_by_id"):
            return await self.session.get(Category, category_id)

    async def get_by_code(self, code: str) -> Category | None:
        with translate_store_errors("categories.get_by_code"):
            result = await self.session.execute(
                select(Category).where(Category.code == code)
            )
            return result.scalar_one_or_none()

    async def get_products(self, code: str) -> Sequence[Product]:
        query = (
            select(Category)
            .where(Category.code == code)
            .options(
                selectinload(Category.products).selectinload(Product.variants),
                selectinload(Category.products).selectinload(Product.category),
            )
        )
        with translate_store_errors("categories.get_products"):
            result = await self.session.execute(query)
            category = result.scalar_one_or_none()
        if category is None:
            return []
        return category.products
