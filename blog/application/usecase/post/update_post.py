"""Update post use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import PostDetail
from blog.domain.service import PostService
from blog.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``tags`` is the complete new tag set, not a delta.
    """

    post_id: int
    title: str
    body: str
    tags: list[str] = []


class UpdatePostUseCase(BaseUseCase):
    """Use case for overwriting a post's content and tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostDetail:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            Updated post detail

        Raises:
            ValidationError: If title, body or any tag is blank
            NotFoundError: If the post does not exist
        """
        return await self.post_service.update_post(
            post_id=PostId(request.post_id),
            title=request.title,
            body=request.body,
            tags=request.tags,
        )
