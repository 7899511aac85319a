"""Update comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import CommentView
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: int
    comment_id: int
    text: str


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing the text of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentView:
        """Execute update comment flow.

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the comment does not exist under the post
        """
        comment = await self.comment_service.update_comment(
            post_id=PostId(request.post_id),
            comment_id=CommentId(request.comment_id),
            text=request.text,
        )
        return CommentView.from_comment(comment)
