"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Missing posts are reported as ``None``/``False`` results, never raised.
    Connectivity and constraint failures surface as ``StorageError``.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(self, term: str = "", limit: int = 10, offset: int = 0) -> List[Post]:
        """Find posts whose title or body contains ``term``.

        Matching is a case-insensitive substring test; an empty term matches
        every post. Results are ordered newest first (created_at DESC, then
        id DESC).

        Args:
            term: Substring to look for
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Matching posts for the requested window
        """
        pass

    @abstractmethod
    async def count(self, term: str = "") -> int:
        """Count posts matched by :meth:`search` with the same term.

        Args:
            term: Substring to look for

        Returns:
            Number of matching posts
        """
        pass

    @abstractmethod
    async def create(self, title: str, body: str) -> Post:
        """Insert a new post with zero likes and no image.

        Args:
            title: Post title
            body: Post body

        Returns:
            The stored post with its generated id and timestamps
        """
        pass

    @abstractmethod
    async def update_content(
        self, post_id: PostId, title: str, body: str
    ) -> Optional[Post]:
        """Overwrite title and body and refresh updated_at.

        Args:
            post_id: The post ID
            title: New title
            body: New body

        Returns:
            The updated post, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed
        """
        pass

    @abstractmethod
    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment the like counter by 1.

        The increment happens in storage in a single statement so that
        concurrent callers never lose updates.

        Args:
            post_id: The post ID

        Returns:
            The new like count, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def set_image(self, post_id: PostId, image: bytes) -> bool:
        """Store (or replace) the image bytes of a post.

        Args:
            post_id: The post ID
            image: Raw image bytes

        Returns:
            True if the post exists and was updated
        """
        pass

    @abstractmethod
    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Load the image bytes of a post.

        Args:
            post_id: The post ID

        Returns:
            Image bytes, or None if the post or its image is missing
        """
        pass
