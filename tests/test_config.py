"""Tests for application configuration."""

import pytest

from catalog_api.infrastructure.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should serve on 8080 with JSON logs by default."""
        for name in ["HTTP_HOST", "HTTP_PORT", "LOG_FORMAT", "DEBUG"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)
        assert settings.http_host == "0.0.0.0"
        assert settings.http_port == 8080
        assert settings.log_format == "json"
        assert settings.debug is False

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read values from environment variables."""
        monkeypatch.setenv("HTTP_PORT", "9090")
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/test")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)
        assert settings.http_port == 9090
        assert settings.database_url == "postgresql+asyncpg://u:p@localhost/test"
        assert settings.log_level == "DEBUG"
