"""Tests for health check endpoints."""

from collections.abc import AsyncGenerator, Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.infrastructure.database import get_session
from catalog_api.main import app


async def sqlite_session() -> AsyncGenerator[AsyncSession, None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with AsyncSession(engine) as session:
        yield session
    await engine.dispose()


async def unreachable_session() -> AsyncGenerator[AsyncSession, None]:
    session = MagicMock(spec=AsyncSession)
    session.execute = AsyncMock(
        side_effect=OperationalError("SELECT 1", {}, ConnectionRefusedError())
    )
    yield session


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create test client."""
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint returns ready status when the database answers."""
    app.dependency_overrides[get_session] = sqlite_session

    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_readiness_check_database_down(client: TestClient) -> None:
    """Test readiness endpoint returns 503 when the database is unreachable."""
    app.dependency_overrides[get_session] = unreachable_session

    response = client.get("/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["reason"] == "database_unavailable"
