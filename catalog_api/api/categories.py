"""Category API endpoints.

Provides endpoints for listing and creating categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategorySchema,
    ErrorResponse,
    MessageResponse,
)
from catalog_api.catalog.repository import CategoryRepository, SqlAlchemyCategoryRepository
from catalog_api.catalog.service import CategoryService
from catalog_api.infrastructure.database import get_session

router = APIRouter(prefix="/categories", tags=["Categories"])


# ============================================================================
# Dependencies
# ============================================================================


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryRepository:
    """Get category repository bound to the request session."""
    return SqlAlchemyCategoryRepository(session)


def get_category_service(
    repository: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> CategoryService:
    """Get category service."""
    return CategoryService(repository)


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CategoryListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
    description="Get all categories in store order.",
)
async def list_categories(
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> CategoryListResponse:
    """List all categories.

    Args:
        service: Category service.

    Returns:
        Category codes and names.
    """
    categories = await service.list()
    return CategoryListResponse(
        categories=[CategorySchema(code=c.code, name=c.name) for c in categories]
    )


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    description="Create a category with a unique code.",
)
async def create_category(
    payload: CategoryCreateRequest,
    service: Annotated[CategoryService, Depends(get_category_service)],
) -> MessageResponse:
    """Create a category.

    Args:
        payload: Category code and name.
        service: Category service.

    Returns:
        Confirmation message.

    Raises:
        ValidationError: If code or name is empty.
        CategoryCodeExistsError: If the code is already taken.
    """
    await service.create(payload.code, payload.name)
    return MessageResponse(message="Category created successfully")
