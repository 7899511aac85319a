"""Tag domain service."""

import logfire

from blog.domain.error import ValidationError
from blog.domain.repository import TagRepository
from blog.domain.value import PostId

from .base import Service


class TagService(Service):
    """Keeps the tag set of each post consistent with its owner.

    Duplicate tag text is kept as supplied; no deduplication happens here.
    """

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    @staticmethod
    def validate_tags(tags: list[str] | None) -> list[str]:
        """Check that every tag is non-blank.

        Args:
            tags: Caller-supplied tags (None means no tags)

        Returns:
            The tags as a list, order and duplicates preserved

        Raises:
            ValidationError: If any tag is blank
        """
        if not tags:
            return []
        for tag in tags:
            if tag is None or not tag.strip():
                raise ValidationError("Tags must not be empty")
            if len(tag) > 255:
                raise ValidationError("Tags must be at most 255 characters")
        return list(tags)

    async def tags_for(self, post_id: PostId) -> list[str]:
        """Get the tag text of a post.

        Args:
            post_id: Post ID

        Returns:
            Tag text in insertion order
        """
        tags = await self.tag_repository.find_by_post(post_id)
        return [tag.tag for tag in tags]

    async def tags_for_posts(self, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        """Get the tag text of several posts at once.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping with an entry (possibly empty) for every requested post
        """
        if not post_ids:
            return {}
        found = await self.tag_repository.find_by_posts(post_ids)
        return {post_id: found.get(post_id, []) for post_id in post_ids}

    async def add_tags(self, post_id: PostId, tags: list[str]) -> list[str]:
        """Attach tags to a freshly created post.

        Args:
            post_id: Post ID
            tags: Validated tag text

        Returns:
            Tag text as stored
        """
        if not tags:
            return []
        with logfire.span("tag_service.add_tags", post_id=post_id, count=len(tags)):
            saved = await self.tag_repository.add_many(post_id, tags)
            logfire.info("Tags added", post_id=post_id, count=len(saved))
            return [tag.tag for tag in saved]

    async def replace_tags(self, post_id: PostId, tags: list[str]) -> list[str]:
        """Replace the full tag set of a post.

        Tags missing from ``tags`` are removed even if they were present
        before; this is an overwrite, not a merge.

        Args:
            post_id: Post ID
            tags: Validated tag text

        Returns:
            Tag text as stored
        """
        with logfire.span("tag_service.replace_tags", post_id=post_id, count=len(tags)):
            saved = await self.tag_repository.replace_for_post(post_id, tags)
            logfire.info("Tags replaced", post_id=post_id, count=len(saved))
            return [tag.tag for tag in saved]

    async def delete_tags_for(self, post_id: PostId) -> int:
        """Remove every tag of a post. Safe to call when there are none.

        Args:
            post_id: Post ID

        Returns:
            Number of removed tags
        """
        with logfire.span("tag_service.delete_tags_for", post_id=post_id):
            removed = await self.tag_repository.delete_by_post(post_id)
            logfire.info("Tags deleted", post_id=post_id, count=removed)
            return removed
