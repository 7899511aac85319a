"""Create post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import PostDetail
from blog.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request.

    Content rules (non-blank title, body and tags) are enforced by the
    domain service so that every caller gets the same ValidationError.
    """

    title: str
    body: str
    tags: list[str] = []


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post with its tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostDetail:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Detail view of the new post (zero likes, zero comments)

        Raises:
            ValidationError: If title, body or any tag is blank
        """
        return await self.post_service.create_post(
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
