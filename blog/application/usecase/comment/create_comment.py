"""Create comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotFoundError
from blog.domain.model import CommentView
from blog.domain.service import CommentService, PostService
from blog.domain.value import PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    text: str
    author: str | None = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for adding a comment to a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Steps:
        1. Validate comment content
        2. Verify post exists via post service
        3. Create comment via comment service

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)

        self.comment_service.validate_comment(request.text, request.author)

        if not await self.post_service.post_exists(post_id):
            logfire.warn("Comment rejected, post not found", post_id=post_id)
            raise NotFoundError("Post", post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id, text=request.text, author=request.author
        )
        return CommentView.from_comment(comment)
