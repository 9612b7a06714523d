"""Tests for category API endpoints."""

from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from catalog_api.api.categories import get_category_repository
from catalog_api.catalog.repository import CategoryRepository
from catalog_api.domain.exceptions import InfrastructureError
from catalog_api.main import app


class TestListCategories:
    """Tests for GET /categories."""

    def test_list_categories(self, client: TestClient) -> None:
        """Should list every category in store order."""
        response = client.get("/categories")
        assert response.status_code == 200
        assert response.json() == {
            "categories": [
                {"code": "clothing", "name": "Clothing"},
                {"code": "shoes", "name": "Shoes"},
                {"code": "accessories", "name": "Accessories"},
            ]
        }

    def test_store_failure_returns_500(self, client: TestClient) -> None:
        """Store failures should surface as a generic server error."""
        repository = MagicMock(spec=CategoryRepository)
        repository.list_all = AsyncMock(side_effect=InfrastructureError("down"))
        app.dependency_overrides[get_category_repository] = lambda: repository

        response = client.get("/categories")
        assert response.status_code == 500
        assert response.json()["error_code"] == "INFRASTRUCTURE_ERROR"


class TestCreateCategory:
    """Tests for POST /categories."""

    def test_create_category(self, client: TestClient) -> None:
        """Should create the category and list it afterwards."""
        response = client.post("/categories", json={"code": "bags", "name": "Bags"})
        assert response.status_code == 200
        assert response.json() == {"message": "Category created successfully"}

        categories = client.get("/categories").json()["categories"]
        assert categories[-1] == {"code": "bags", "name": "Bags"}

    def test_duplicate_code_conflicts(self, client: TestClient) -> None:
        """Should return 409 and leave the existing category untouched."""
        response = client.post(
            "/categories", json={"code": "shoes", "name": "Footwear"}
        )
        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "CATEGORY_CODE_EXISTS"
        assert data["message"] == "category code already exists"

        categories = client.get("/categories").json()["categories"]
        assert {"code": "shoes", "name": "Shoes"} in categories
        assert len(categories) == 3

    def test_missing_name_rejected(self, client: TestClient) -> None:
        """Should reject a category without a name."""
        response = client.post("/categories", json={"code": "bags"})
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Code and name are required"

    def test_empty_code_rejected(self, client: TestClient) -> None:
        """Should reject a category with an empty code."""
        response = client.post("/categories", json={"code": "", "name": "Bags"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_invalid_json_rejected(self, client: TestClient) -> None:
        """Should reject a body that is not JSON."""
        response = client.post(
            "/categories",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["message"] == "Invalid JSON"

    def test_missing_body_rejected(self, client: TestClient) -> None:
        """Should reject a request without a body."""
        response = client.post("/categories")
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_store_failure_returns_500(self, client: TestClient) -> None:
        """Store failures should surface as a generic server error."""
        repository = MagicMock(spec=CategoryRepository)
        repository.create = AsyncMock(side_effect=InfrastructureError("down"))
        app.dependency_overrides[get_category_repository] = lambda: repository

        response = client.post("/categories", json={"code": "bags", "name": "Bags"})
        assert response.status_code == 500
        assert response.json()["error_code"] == "INFRASTRUCTURE_ERROR"
