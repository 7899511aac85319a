"""In-memory comment repository for testing."""

from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_id(
        self, comment_id: CommentId, post_id: PostId
    ) -> Optional[Comment]:
        """Find a comment by ID within a post."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return None
        return comment

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def create(
        self, post_id: PostId, text: str, author: Optional[str] = None
    ) -> Comment:
        """Insert a comment."""
        now = self._store.now()
        comment = Comment(
            id=CommentId(self._store.next_comment_id()),
            post_id=post_id,
            text=text,
            author=author,
            created_at=now,
            updated_at=now,
        )
        self._store.comments[comment.id] = comment
        return comment

    async def update_text(
        self, comment_id: CommentId, post_id: PostId, text: str
    ) -> Optional[Comment]:
        """Replace the text of a comment."""
        comment = await self.find_by_id(comment_id, post_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"text": text, "updated_at": max(self._store.now(), comment.created_at)}
        )
        self._store.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId, post_id: PostId) -> bool:
        """Delete a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None or comment.post_id != post_id:
            return False
        del self._store.comments[comment_id]
        return True

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        doomed = [cid for cid, c in self._store.comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._store.comments[comment_id]
        return len(doomed)

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._store.comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: List[PostId]) -> dict[PostId, int]:
        """Count comments for several posts."""
        wanted = set(post_ids)
        counts: dict[PostId, int] = {}
        for comment in self._store.comments.values():
            if comment.post_id in wanted:
                counts[comment.post_id] = counts.get(comment.post_id, 0) + 1
        return counts
