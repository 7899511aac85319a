"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import PostDetail
from blog.domain.service import PostService
from blog.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving a single post with its full body."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Optional[PostDetail]:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            Post detail if found, None otherwise
        """
        return await self.post_service.get_post_detail(PostId(request.post_id))
