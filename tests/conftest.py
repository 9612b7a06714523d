"""Root conftest - shared test configuration."""

import os

# Keep tests off the production database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from catalog_api.api.catalog import get_product_repository  # noqa: E402
from catalog_api.api.categories import get_category_repository  # noqa: E402
from catalog_api.catalog.memory import (  # noqa: E402
    InMemoryCatalog,
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)
from catalog_api.catalog.seed import build_catalog  # noqa: E402
from catalog_api.main import app  # noqa: E402


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Sample catalog with IDs assigned in seed order."""
    categories, products = build_catalog()
    return InMemoryCatalog(categories, products)


@pytest.fixture
def client(catalog: InMemoryCatalog) -> Iterator[TestClient]:
    """Test client whose repositories read and write the sample catalog."""
    app.dependency_overrides[get_product_repository] = (
        lambda: InMemoryProductRepository(catalog)
    )
    app.dependency_overrides[get_category_repository] = (
        lambda: InMemoryCategoryRepository(catalog)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
