"""Tag repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.tag import PostTag
from blog.domain.value import PostId


class TagRepository(ABC):
    """Repository for tags attached to posts."""

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags of a post, in insertion order.

        Args:
            post_id: The post ID

        Returns:
            Tags of the post (empty if none)
        """
        pass

    @abstractmethod
    async def find_by_posts(self, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        """Fetch tag text for several posts in one round trip.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to tag text; posts without tags may be absent
        """
        pass

    @abstractmethod
    async def add_many(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Insert one tag row per entry, keeping duplicates.

        Args:
            post_id: The post ID
            tags: Tag text to insert

        Returns:
            The inserted tags
        """
        pass

    @abstractmethod
    async def replace_for_post(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Swap the whole tag set of a post.

        Removes every existing tag of the post, then inserts ``tags``.
        Readers never observe the post with neither the old nor the new set.

        Args:
            post_id: The post ID
            tags: New tag text

        Returns:
            The inserted tags
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every tag of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of removed rows (0 when there was nothing to delete)
        """
        pass
