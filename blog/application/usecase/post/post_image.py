"""Post image use cases (upload and download)."""

from typing import Optional

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import PostService
from blog.domain.value import PostId


class UploadImageRequest(BaseModel):
    """Upload image request."""

    post_id: int
    image: bytes


class GetImageRequest(BaseModel):
    """Get image request."""

    post_id: int


class PostImageUseCase(BaseUseCase):
    """Use case for storing and reading the image of a post.

    ``execute`` stores an image; ``fetch`` reads it back.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize post image use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UploadImageRequest) -> None:
        """Store or replace the image of a post.

        Raises:
            ValidationError: If the image is empty
            NotFoundError: If the post does not exist
        """
        await self.post_service.attach_image(PostId(request.post_id), request.image)

    async def fetch(self, request: GetImageRequest) -> Optional[bytes]:
        """Read the image of a post.

        Returns:
            Image bytes, or None when the post or its image is missing
        """
        return await self.post_service.get_image(PostId(request.post_id))
