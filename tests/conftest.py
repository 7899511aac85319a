"""Test configuration and fixtures."""

import os

import pytest

from blog.config import PaginationSettings

# PostgreSQL URL for integration tests; they are skipped when unset
TEST_DATABASE_URL = os.environ.get("BLOG_TEST_DATABASE_URL")


@pytest.fixture
def pagination() -> PaginationSettings:
    """Default post listing settings."""
    return PaginationSettings()


def make_body(length: int, char: str = "a") -> str:
    """Build a post body of an exact length."""
    return char * length
