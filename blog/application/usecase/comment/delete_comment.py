"""Delete comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: int
    comment_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for removing a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist under the post
        """
        await self.comment_service.delete_comment(
            PostId(request.post_id), CommentId(request.comment_id)
        )
