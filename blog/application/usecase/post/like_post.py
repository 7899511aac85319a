"""Like post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService
from blog.domain.value import PostId


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: int


class LikePostUseCase(BaseUseCase):
    """Use case for adding one like to a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> int:
        """Execute like flow.

        Returns:
            The post's new like count

        Raises:
            NotFoundError: If the post does not exist
        """
        return await self.post_service.increment_likes(PostId(request.post_id))
