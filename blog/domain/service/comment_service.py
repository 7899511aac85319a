"""Comment domain service."""

import logfire

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId

from .base import Service

ANONYMOUS_AUTHOR = "Anonymous"


class CommentService(Service):
    """Domain service for comment operations.

    Comment counts are always derived from the stored rows, never cached.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    def validate_comment(self, text: str, author: str | None = None) -> None:
        """Check comment content before anything is stored.

        Raises:
            ValidationError: If text is blank or the author label is too long
        """
        self._require_text(text, "Comment text")
        if author is not None and len(author) > 255:
            raise ValidationError("Author must be at most 255 characters")

    async def count_for(self, post_id: PostId) -> int:
        """Count the comments of a post.

        Args:
            post_id: Post ID

        Returns:
            Number of comments (0 if none)
        """
        return await self.comment_repository.count_by_post(post_id)

    async def counts_for(self, post_ids: list[PostId]) -> dict[PostId, int]:
        """Count the comments of several posts at once.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping with an entry for every requested post
        """
        if not post_ids:
            return {}
        found = await self.comment_repository.count_by_posts(post_ids)
        return {post_id: found.get(post_id, 0) for post_id in post_ids}

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            List of comments
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment(self, post_id: PostId, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID within a post.

        Args:
            post_id: Post ID
            comment_id: Comment ID

        Returns:
            Comment if found under the post, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment", post_id=post_id, comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id, post_id)
            if comment:
                logfire.info("Comment found", comment_id=comment_id)
            else:
                logfire.warn("Comment not found", comment_id=comment_id, post_id=post_id)
            return comment

    async def create_comment(
        self, post_id: PostId, text: str, author: str | None = None
    ) -> Comment:
        """Create a comment on a post.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            text: Comment text
            author: Optional author label; blank or missing is stored
                as "Anonymous"

        Returns:
            Created comment

        Raises:
            ValidationError: If text is blank
        """
        self.validate_comment(text, author)
        if author is None or not author.strip():
            author = ANONYMOUS_AUTHOR

        with logfire.span("comment_service.create_comment", post_id=post_id):
            comment = await self.comment_repository.create(post_id, text, author)
            logfire.info("Comment created", comment_id=comment.id, post_id=post_id)
            return comment

    async def update_comment(
        self, post_id: PostId, comment_id: CommentId, text: str
    ) -> Comment:
        """Replace the text of a comment.

        Args:
            post_id: Post ID
            comment_id: Comment ID
            text: New text

        Returns:
            Updated comment

        Raises:
            ValidationError: If text is blank
            NotFoundError: If the comment does not exist under the post
        """
        self._require_text(text, "Comment text")

        with logfire.span(
            "comment_service.update_comment",
            post_id=post_id,
            comment_id=comment_id,
            text_length=len(text),
        ):
            updated = await self.comment_repository.update_text(
                comment_id, post_id, text
            )
            if updated is None:
                logfire.warn(
                    "Comment not found for update",
                    comment_id=comment_id,
                    post_id=post_id,
                )
                raise NotFoundError("Comment", comment_id)

            logfire.info("Comment text updated", comment_id=comment_id)
            return updated

    async def delete_comment(self, post_id: PostId, comment_id: CommentId) -> None:
        """Delete a single comment.

        Args:
            post_id: Post ID
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment does not exist under the post
        """
        with logfire.span(
            "comment_service.delete_comment", post_id=post_id, comment_id=comment_id
        ):
            removed = await self.comment_repository.delete(comment_id, post_id)
            if not removed:
                logfire.warn(
                    "Comment not found for delete",
                    comment_id=comment_id,
                    post_id=post_id,
                )
                raise NotFoundError("Comment", comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)

    async def delete_comments_for(self, post_id: PostId) -> int:
        """Remove every comment of a post. Safe to call when there are none.

        Args:
            post_id: Post ID

        Returns:
            Number of removed comments
        """
        with logfire.span("comment_service.delete_comments_for", post_id=post_id):
            removed = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments deleted", post_id=post_id, count=removed)
            return removed
