"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.domain.repository import CommentRepository, PostRepository, TagRepository
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryTagRepository,
)
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    One store lives for the whole container, so every request made against
    the same container (and so within one test) sees the same data. Each
    test builds a fresh container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)
