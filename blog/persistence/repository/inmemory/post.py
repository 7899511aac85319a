"""In-memory post repository for testing."""

from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    def _matching(self, term: str) -> list[Post]:
        posts = list(self._store.posts.values())
        if term:
            needle = term.lower()
            posts = [
                p for p in posts if needle in p.title.lower() or needle in p.body.lower()
            ]
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def search(self, term: str = "", limit: int = 10, offset: int = 0) -> List[Post]:
        """Find matching posts, newest first."""
        posts = self._matching(term)
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts[offset : offset + limit]

    async def count(self, term: str = "") -> int:
        """Count matching posts."""
        return len(self._matching(term))

    async def create(self, title: str, body: str) -> Post:
        """Insert a post."""
        now = self._store.now()
        post = Post(
            id=PostId(self._store.next_post_id()),
            title=title,
            body=body,
            like_count=0,
            created_at=now,
            updated_at=now,
        )
        self._store.posts[post.id] = post
        return post

    async def update_content(
        self, post_id: PostId, title: str, body: str
    ) -> Optional[Post]:
        """Overwrite title and body."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(
            update={
                "title": title,
                "body": body,
                "updated_at": max(self._store.now(), post.created_at),
            }
        )
        self._store.posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its tags, comments and image."""
        return self._store.drop_post(post_id)

    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Increment the like counter without yielding to other coroutines."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"like_count": post.like_count + 1})
        self._store.posts[post_id] = updated
        return updated.like_count

    async def set_image(self, post_id: PostId, image: bytes) -> bool:
        """Store or replace the image of a post."""
        if post_id not in self._store.posts:
            return False
        self._store.images[post_id] = bytes(image)
        return True

    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Load the image of a post."""
        return self._store.images.get(post_id) or None
