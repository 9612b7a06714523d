"""Domain exceptions.

All errors the catalog core can surface to the transport layer. Each
family maps to one outcome:

- ValidationError: malformed request input, rejected before any store access.
- ConflictError: a uniqueness violation reported by the store.
- InfrastructureError: any other store-level failure, including connectivity.

An empty query result is not an error and has no exception here.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Validation Errors
# ============================================================================


class ValidationError(DomainError):
    """Raised when request input is malformed or incomplete."""

    error_code = "VALIDATION_ERROR"


class InvalidProductCodeError(ValidationError):
    """Raised when a product code does not match the PROD### format."""

    error_code = "INVALID_PRODUCT_CODE"

    def __init__(self, code: str) -> None:
        """Initialize invalid product code error.

        Args:
            code: The rejected product code.
        """
        super().__init__(
            "Invalid product code format. "
            "Expected format: PROD followed by 3 digits (e.g., PROD001)",
            details={"code": code},
        )


# ============================================================================
# Conflict Errors
# ============================================================================


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    error_code = "CONFLICT"


class CategoryCodeExistsError(ConflictError):
    """Raised when creating a category whose code is already taken."""

    error_code = "CATEGORY_CODE_EXISTS"

    def __init__(self, code: str) -> None:
        """Initialize category code exists error.

        Args:
            code: The duplicated category code.
        """
        super().__init__(
            "category code already exists",
            details={"code": code},
        )


# ============================================================================
# Infrastructure Errors
# ============================================================================


class InfrastructureError(DomainError):
    """Raised when the backing store fails.

    Never retried by the core; always surfaced as a generic server failure.
    """

    error_code = "INFRASTRUCTURE_ERROR"
