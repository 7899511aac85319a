"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from blog.config import PaginationSettings, Settings


class TestPaginationSettings:
    """Tests for PaginationSettings."""

    def test_defaults(self):
        settings = PaginationSettings()

        assert settings.default_page_size == 5
        assert settings.max_page_size == 100
        assert settings.preview_length == 128

    def test_default_must_fit_under_maximum(self):
        with pytest.raises(ValidationError):
            PaginationSettings(default_page_size=50, max_page_size=10)


class TestSettings:
    """Tests for Settings."""

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAGINATION__DEFAULT_PAGE_SIZE", "10")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        settings = Settings()

        assert settings.pagination.default_page_size == 10
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"

    @pytest.mark.parametrize(
        "environment,protocol",
        [("development", "http"), ("test", "http"), ("production", "https")],
    )
    def test_protocol_follows_environment(self, environment, protocol):
        settings = Settings(environment=environment)

        assert settings.api.protocol == protocol
