"""Catalog API endpoints.

Provides endpoints for listing products and retrieving a single product
with its variants.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import ErrorResponse
from catalog_api.catalog.assembler import prepare_response
from catalog_api.catalog.repository import (
    ProductRepository,
    SearchFilters,
    SqlAlchemyProductRepository,
)
from catalog_api.catalog.schemas import CatalogResponse
from catalog_api.catalog.service import CatalogQueryService
from catalog_api.catalog.validators import validate_product_code, validate_product_filters
from catalog_api.domain.exceptions import InvalidProductCodeError
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Dependencies
# ============================================================================


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductRepository:
    """Get product repository bound to the request session."""
    return SqlAlchemyProductRepository(session)


def get_catalog_service(
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
) -> CatalogQueryService:
    """Get catalog query service."""
    return CatalogQueryService(repository)


def get_search_filters(
    offset: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
    price_less_than: Annotated[str | None, Query(alias="priceLessThan")] = None,
    category: Annotated[str | None, Query()] = None,
) -> SearchFilters:
    """Normalize raw listing query parameters into search filters."""
    return validate_product_filters(offset, limit, price_less_than, category)


def get_product_code(code: str) -> str:
    """Validate the product code path parameter.

    Raises:
        InvalidProductCodeError: If the code is not PROD followed by 3 digits.
    """
    if not validate_product_code(code):
        raise InvalidProductCodeError(code)
    return code


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CatalogResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description="Get a page of products, optionally filtered by category and price.",
)
async def list_products(
    filters: Annotated[SearchFilters, Depends(get_search_filters)],
    service: Annotated[CatalogQueryService, Depends(get_catalog_service)],
) -> CatalogResponse:
    """List products.

    Invalid pagination or price parameters fall back to defaults instead of
    failing the request.

    Args:
        filters: Normalized search filters.
        service: Catalog query service.

    Returns:
        Products with the number of purchasable variants.
    """
    products = await service.list(filters)
    return prepare_response(products, include_variants=False)


@router.get(
    "/{code}",
    response_model=CatalogResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product details",
    description="Get a product by code, including its variants with effective prices.",
)
async def get_product(
    code: Annotated[str, Depends(get_product_code)],
    service: Annotated[CatalogQueryService, Depends(get_catalog_service)],
) -> CatalogResponse:
    """Get a product by code.

    Args:
        code: Validated product code.
        service: Catalog query service.

    Returns:
        The product and its variants. An unknown code yields one empty product.
    """
    product = await service.get_by_code(code)
    return prepare_response([product], include_variants=True)
