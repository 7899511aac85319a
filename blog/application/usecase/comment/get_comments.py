"""Get comments use cases."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotFoundError
from blog.domain.model import CommentView
from blog.domain.service import CommentService, PostService
from blog.domain.value import CommentId, PostId


class GetCommentsRequest(BaseModel):
    """Get comments request.

    With ``comment_id`` set, a single comment is looked up instead.
    """

    post_id: int
    comment_id: int | None = None


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comments of a post."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentView]:
        """List every comment of a post, oldest first.

        Args:
            request: Get comments request

        Returns:
            Comment views

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        if not await self.post_service.post_exists(post_id):
            raise NotFoundError("Post", post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        return [CommentView.from_comment(comment) for comment in comments]

    async def get_one(self, request: GetCommentsRequest) -> Optional[CommentView]:
        """Look up one comment scoped to its post.

        Args:
            request: Request carrying both post and comment IDs

        Returns:
            Comment view, or None if the comment does not exist under the post
        """
        if request.comment_id is None:
            return None

        comment = await self.comment_service.get_comment(
            PostId(request.post_id), CommentId(request.comment_id)
        )
        return CommentView.from_comment(comment) if comment else None
