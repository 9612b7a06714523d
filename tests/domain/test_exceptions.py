"""Tests for domain exceptions."""

from catalog_api.domain.exceptions import (
    CategoryCodeExistsError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidProductCodeError,
    ValidationError,
)


class TestDomainError:
    """Tests for the domain error hierarchy."""

    def test_message_and_details(self) -> None:
        """Should keep message and default to empty details."""
        error = ValidationError("Code and name are required")
        assert str(error) == "Code and name are required"
        assert error.message == "Code and name are required"
        assert error.details == {}
        assert error.error_code == "VALIDATION_ERROR"

    def test_invalid_product_code(self) -> None:
        """Should be a validation error naming the expected format."""
        error = InvalidProductCodeError("PROD1")
        assert isinstance(error, ValidationError)
        assert error.error_code == "INVALID_PRODUCT_CODE"
        assert error.details == {"code": "PROD1"}
        assert "PROD001" in error.message

    def test_category_code_exists(self) -> None:
        """Should be a conflict error carrying the code."""
        error = CategoryCodeExistsError("shoes")
        assert isinstance(error, ConflictError)
        assert isinstance(error, DomainError)
        assert error.error_code == "CATEGORY_CODE_EXISTS"
        assert error.message == "category code already exists"
        assert error.details == {"code": "shoes"}

    def test_infrastructure_error_is_not_client_error(self) -> None:
        """Store failures belong to neither the validation nor conflict family."""
        error = InfrastructureError("connection refused")
        assert error.error_code == "INFRASTRUCTURE_ERROR"
        assert not isinstance(error, ValidationError)
        assert not isinstance(error, ConflictError)
