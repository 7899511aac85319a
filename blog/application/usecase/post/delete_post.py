"""Delete post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService
from blog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post with its comments and tags."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        await self.post_service.delete_post(PostId(request.post_id))
