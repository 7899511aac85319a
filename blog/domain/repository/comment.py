"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, post_id: PostId
    ) -> Optional[Comment]:
        """Find a comment by ID within a post.

        Args:
            comment_id: The comment's unique identifier
            post_id: The post the comment must belong to

        Returns:
            The comment if found under that post, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def create(
        self, post_id: PostId, text: str, author: Optional[str] = None
    ) -> Comment:
        """Insert a new comment.

        Args:
            post_id: The post ID
            text: Comment text
            author: Optional author label

        Returns:
            The stored comment with generated id and timestamps
        """
        pass

    @abstractmethod
    async def update_text(
        self, comment_id: CommentId, post_id: PostId, text: str
    ) -> Optional[Comment]:
        """Replace the text of a comment and refresh updated_at.

        Args:
            comment_id: The comment ID
            post_id: The post the comment must belong to
            text: New text

        Returns:
            The updated comment, or None if it does not exist under that post
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId, post_id: PostId) -> bool:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID
            post_id: The post the comment must belong to

        Returns:
            True if a comment was removed
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of removed comments
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: List[PostId]) -> dict[PostId, int]:
        """Count comments for several posts in one round trip.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to comment count; posts without comments may be absent
        """
        pass
