"""API schemas for the Catalog API.

Pydantic models for request/response validation and serialization.
Catalog response models live in catalog_api.catalog.schemas.
"""

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(..., description="Confirmation message")


# ============================================================================
# Category Schemas
# ============================================================================


class CategorySchema(BaseModel):
    """Category information."""

    code: str = Field(..., description="Category code")
    name: str = Field(..., description="Category display name")


class CategoryListResponse(BaseModel):
    """List of categories."""

    categories: list[CategorySchema] = Field(..., description="Categories in store order")


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Empty values are accepted here and rejected by the category service.
    """

    code: str = Field(default="", description="Unique category code")
    name: str = Field(default="", description="Category display name")
