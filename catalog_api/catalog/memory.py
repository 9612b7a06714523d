"""In-memory catalog repositories.

Dict-backed implementations of the repository capabilities, used by tests
and for running the API without a database. They honor the same contract as
the SQLAlchemy repositories: ordering by ID, empty results instead of errors,
and CategoryCodeExistsError on duplicate codes.
"""

from collections.abc import Iterable, Sequence

from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SearchFilters,
)
from catalog_api.domain.exceptions import CategoryCodeExistsError


class InMemoryCatalog:
    """Shared store behind the in-memory product and category repositories.

    Assigns sequential IDs the way an autoincrement column would.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        products: Iterable[Product] = (),
    ) -> None:
        self._categories: dict[int, Category] = {}
        self._products: dict[int, Product] = {}
        self._next_category_id = 1
        self._next_product_id = 1
        self._next_variant_id = 1

        for category in categories:
            self.add_category(category)
        for product in products:
            self.add_product(product)

    def add_category(self, category: Category) -> Category:
        """Store a category, assigning an ID if it has none."""
        if category.id is None:
            category.id = self._next_category_id
        self._next_category_id = max(self._next_category_id, category.id + 1)
        self._categories[category.id] = category
        return category

    def add_product(self, product: Product) -> Product:
        """Store a product and its variants, assigning IDs where missing."""
        if product.id is None:
            product.id = self._next_product_id
        self._next_product_id = max(self._next_product_id, product.id + 1)

        if product.category is not None:
            if product.category.id is None or product.category.id not in self._categories:
                self.add_category(product.category)
            product.category_id = product.category.id

        for variant in product.variants:
            if variant.id is None:
                variant.id = self._next_variant_id
            self._next_variant_id = max(self._next_variant_id, variant.id + 1)
            variant.product_id = product.id

        self._products[product.id] = product
        return product

    def get_category(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    def get_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    @property
    def categories(self) -> list[Category]:
        """Categories ordered by ID."""
        return [self._categories[key] for key in sorted(self._categories)]

    @property
    def products(self) -> list[Product]:
        """Products ordered by ID."""
        return [self._products[key] for key in sorted(self._products)]


class InMemoryProductRepository(ProductRepository):
    """ProductRepository over an InMemoryCatalog."""

    def __init__(self, catalog: InMemoryCatalog) -> None:
        self.catalog = catalog

    async def list_all(self) -> Sequence[Product]:
        return self.catalog.products

    async def list(self, filters: SearchFilters) -> Sequence[Product]:
        matches = [
            product
            for product in self.catalog.products
            if _matches(product, filters)
        ]
        return matches[filters.offset:filters.offset + filters.limit]

    async def get_by_id(self, product_id: int) -> Product | None:
        return self.catalog.get_product(product_id)

    async def get_by_code(self, code: str) -> Product | None:
        for product in self.catalog.products:
            if product.code == code:
                return product
        return None

    async def get_by_category(self, category_code: str) -> Sequence[Product]:
        return [
            product
            for product in self.catalog.products
            if product.category is not None and product.category.code == category_code
        ]


class InMemoryCategoryRepository(CategoryRepository):
    """CategoryRepository over an InMemoryCatalog."""

    def __init__(self, catalog: InMemoryCatalog) -> None:
        self.catalog = catalog

    async def list_all(self) -> Sequence[Category]:
        return self.catalog.categories

    async def create(self, code: str, name: str) -> Category:
        if await self.get_by_code(code) is not None:
            raise CategoryCodeExistsError(code)
        return self.catalog.add_category(Category(code=code, name=name))

    async def get_by_id(self, category_id: int) -> Category | None:
        return self.catalog.get_category(category_id)

    async def get_by_code(self, code: str) -> Category | None:
        for category in self.catalog.categories:
            if category.code == code:
                return category
        return None

    async def get_products(self, code: str) -> Sequence[Product]:
        return [
            product
            for product in self.catalog.products
            if product.category is not None and product.category.code == code
        ]


def _matches(product: Product, filters: SearchFilters) -> bool:
    if filters.category and (
        product.category is None or product.category.code != filters.category
    ):
        return False
    if filters.price_less_than is not None and not product.price < filters.price_less_than:
        return False
    return True
