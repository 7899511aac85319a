"""In-memory tag repository for testing."""

from blog.domain.model.tag import PostTag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import PostId, TagId

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags of a post."""
        return [tag for tag in self._store.tags if tag.post_id == post_id]

    async def find_by_posts(self, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        """Fetch tag text for several posts."""
        wanted = set(post_ids)
        result: dict[PostId, list[str]] = {}
        for tag in self._store.tags:
            if tag.post_id in wanted:
                result.setdefault(tag.post_id, []).append(tag.tag)
        return result

    async def add_many(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Insert one row per tag."""
        saved = [
            PostTag(id=TagId(self._store.next_tag_id()), post_id=post_id, tag=tag)
            for tag in tags
        ]
        self._store.tags.extend(saved)
        return saved

    async def replace_for_post(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Swap the whole tag set of a post in one step."""
        saved = [
            PostTag(id=TagId(self._store.next_tag_id()), post_id=post_id, tag=tag)
            for tag in tags
        ]
        kept = [tag for tag in self._store.tags if tag.post_id != post_id]
        self._store.tags = kept + saved
        return saved

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every tag of a post."""
        before = len(self._store.tags)
        self._store.tags = [tag for tag in self._store.tags if tag.post_id != post_id]
        return before - len(self._store.tags)
