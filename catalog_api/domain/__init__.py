"""Domain layer - error taxonomy shared by the catalog core and the API.

Example usage:
    from catalog_api.domain import ConflictError

    try:
        await category_service.create("shoes", "Shoes")
    except ConflictError:
        ...
"""

from catalog_api.domain.exceptions import (
    CategoryCodeExistsError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidProductCodeError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidProductCodeError",
    "ConflictError",
    "CategoryCodeExistsError",
    "InfrastructureError",
]
