"""Test harness for unit and integration tests.

Settings are loaded from environment variables unless given explicitly.
"""

import pytest_asyncio

from blog.config import Settings
from blog.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, settings: Settings | None = None
):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container (and any engine it opened) afterwards

    Args:
        unmock: Components to use real implementations for
        settings: Settings to inject instead of reading the environment

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post("Title", "Body", ["tag"])
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set(), settings=settings)

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
