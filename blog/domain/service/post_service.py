"""Post domain service.

Single entry point for post-level reads and writes. Composes the post
repository with the tag and comment services into list and detail views.
"""

import logfire

from blog.config import PaginationSettings
from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.post import Post
from blog.domain.model.view import PostDetail, PostListItem, PostPage
from blog.domain.repository import PostRepository
from blog.domain.value import PageWindow, PostId, normalize_page_size
from blog.util.text import truncate

from .base import Service
from .comment_service import CommentService
from .tag_service import TagService

TITLE_MAX_LENGTH = 255


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        comment_service: CommentService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            tag_service: Tag domain service
            comment_service: Comment domain service
            pagination: Page size defaults and preview length
        """
        self.post_repository = post_repository
        self.tag_service = tag_service
        self.comment_service = comment_service
        self.pagination = pagination

    async def list_posts(
        self, search: str = "", page_number: int = 1, page_size: int = 0
    ) -> PostPage:
        """Search, paginate and summarize posts.

        Out-of-range paging input is clamped rather than rejected: a page size
        below 1 falls back to the configured default, one above the maximum is
        capped, and the page number is clamped into ``[1, last_page]``.

        Args:
            search: Case-insensitive substring matched against title and body
                (empty or whitespace-only matches everything)
            page_number: Requested 1-indexed page
            page_size: Requested number of posts per page

        Returns:
            Page of list items, newest first
        """
        # Blank search means no filter
        if not search or not search.strip():
            search = ""
        page_size = normalize_page_size(
            page_size,
            default=self.pagination.default_page_size,
            maximum=self.pagination.max_page_size,
        )

        with logfire.span(
            "post_service.list_posts",
            search=search,
            page_number=page_number,
            page_size=page_size,
        ):
            total = await self.post_repository.count(search)
            window = PageWindow.resolve(page_number, page_size, total)

            posts: list[Post] = []
            if total:
                posts = await self.post_repository.search(
                    search, limit=window.page_size, offset=window.offset
                )

            post_ids = [post.id for post in posts]
            tags = await self.tag_service.tags_for_posts(post_ids)
            comment_counts = await self.comment_service.counts_for(post_ids)

            items = [
                PostListItem(
                    id=post.id,
                    title=post.title,
                    body=truncate(post.body, self.pagination.preview_length),
                    tags=tags.get(post.id, []),
                    likes_count=post.like_count,
                    comments_count=comment_counts.get(post.id, 0),
                )
                for post in posts
            ]

            logfire.info(
                "Posts listed",
                count=len(items),
                total=total,
                page_number=window.page_number,
                last_page=window.last_page,
            )

            return PostPage(
                posts=items,
                has_prev=window.has_prev,
                has_next=window.has_next,
                last_page=window.last_page,
                posts_count=total,
            )

    async def get_post_detail(self, post_id: PostId) -> PostDetail | None:
        """Get a post with its full body.

        Args:
            post_id: Post ID

        Returns:
            Post detail if found, None otherwise
        """
        with logfire.span("post_service.get_post_detail", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post is None:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return await self._to_detail(post)

    async def post_exists(self, post_id: PostId) -> bool:
        """Check whether a post is stored."""
        return await self.post_repository.find_by_id(post_id) is not None

    async def create_post(
        self, title: str, body: str, tags: list[str] | None = None
    ) -> PostDetail:
        """Create a post and attach its tags.

        Args:
            title: Post title (non-blank)
            body: Post body (non-blank)
            tags: Optional tag text (each non-blank)

        Returns:
            Detail view of the new post

        Raises:
            ValidationError: If title, body or a tag is blank
        """
        self._validate_content(title, body)
        tags = self.tag_service.validate_tags(tags)

        with logfire.span("post_service.create_post", title=title, tags=tags):
            post = await self.post_repository.create(title, body)
            saved_tags = await self.tag_service.add_tags(post.id, tags)

            logfire.info("Post created", post_id=post.id, tag_count=len(saved_tags))

            return PostDetail(
                id=post.id,
                title=post.title,
                body=post.body,
                tags=saved_tags,
                likes_count=post.like_count,
                comments_count=0,
            )

    async def update_post(
        self, post_id: PostId, title: str, body: str, tags: list[str] | None = None
    ) -> PostDetail:
        """Overwrite title and body and replace the full tag set.

        Args:
            post_id: Post ID
            title: New title (non-blank)
            body: New body (non-blank)
            tags: New tag set; omitted tags are removed

        Returns:
            Detail view with the current like and comment counts

        Raises:
            ValidationError: If title, body or a tag is blank
            NotFoundError: If the post does not exist
        """
        self._validate_content(title, body)
        tags = self.tag_service.validate_tags(tags)

        with logfire.span("post_service.update_post", post_id=post_id, tags=tags):
            post = await self.post_repository.update_content(post_id, title, body)
            if post is None:
                logfire.warn("Post not found for update", post_id=post_id)
                raise NotFoundError("Post", post_id)

            saved_tags = await self.tag_service.replace_tags(post_id, tags)
            comments_count = await self.comment_service.count_for(post_id)

            logfire.info("Post updated", post_id=post_id, tag_count=len(saved_tags))

            return PostDetail(
                id=post.id,
                title=post.title,
                body=post.body,
                tags=saved_tags,
                likes_count=post.like_count,
                comments_count=comments_count,
            )

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post with its comments and tags.

        Dependents are removed explicitly before the post; with cascading
        foreign keys these removals simply find nothing left to delete.

        Args:
            post_id: Post ID

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found for delete", post_id=post_id)
                raise NotFoundError("Post", post_id)

            comments = await self.comment_service.delete_comments_for(post_id)
            tags = await self.tag_service.delete_tags_for(post_id)
            await self.post_repository.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=post_id,
                comments_removed=comments,
                tags_removed=tags,
            )

    async def increment_likes(self, post_id: PostId) -> int:
        """Add one like to a post.

        The increment is pushed down to storage as a single atomic update.

        Args:
            post_id: Post ID

        Returns:
            New like count

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.increment_likes", post_id=post_id):
            like_count = await self.post_repository.increment_likes(post_id)
            if like_count is None:
                logfire.warn("Post not found for like", post_id=post_id)
                raise NotFoundError("Post", post_id)

            logfire.info("Post liked", post_id=post_id, like_count=like_count)
            return like_count

    async def attach_image(self, post_id: PostId, image: bytes) -> None:
        """Store or replace the image of a post.

        Args:
            post_id: Post ID
            image: Raw image bytes (non-empty)

        Raises:
            ValidationError: If image is empty
            NotFoundError: If the post does not exist
        """
        if not image:
            raise ValidationError("Image must not be empty")

        with logfire.span(
            "post_service.attach_image", post_id=post_id, size=len(image)
        ):
            stored = await self.post_repository.set_image(post_id, image)
            if not stored:
                logfire.warn("Post not found for image upload", post_id=post_id)
                raise NotFoundError("Post", post_id)

            logfire.info("Post image stored", post_id=post_id, size=len(image))

    async def get_image(self, post_id: PostId) -> bytes | None:
        """Get the image of a post.

        A missing post and a post without an image both yield None.

        Args:
            post_id: Post ID

        Returns:
            Image bytes or None
        """
        with logfire.span("post_service.get_image", post_id=post_id):
            image = await self.post_repository.get_image(post_id)
            return image or None

    async def _to_detail(self, post: Post) -> PostDetail:
        """Assemble the detail view of a stored post."""
        tags = await self.tag_service.tags_for(post.id)
        comments_count = await self.comment_service.count_for(post.id)
        return PostDetail(
            id=post.id,
            title=post.title,
            body=post.body,
            tags=tags,
            likes_count=post.like_count,
            comments_count=comments_count,
        )

    def _validate_content(self, title: str, body: str) -> None:
        self._require_text(title, "Title")
        self._require_text(body, "Body")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Title must be at most {TITLE_MAX_LENGTH} characters"
            )
