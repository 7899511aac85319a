"""List posts use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.model import PostPage
from blog.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request.

    Paging values are not validated here; the service clamps them.
    """

    search: str = ""
    page_number: int = 1
    page_size: int = 0  # Below 1 selects the configured default


class ListPostsUseCase(BaseUseCase):
    """Use case for searching and paginating posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> PostPage:
        """Execute list posts flow.

        Args:
            request: Search term and paging

        Returns:
            Page of post list items with navigation flags
        """
        return await self.post_service.list_posts(
            search=request.search,
            page_number=request.page_number,
            page_size=request.page_size,
        )
