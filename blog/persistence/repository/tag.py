"""PostgreSQL implementation of Tag repository."""

from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import PostTag
from blog.domain.repository import TagRepository
from blog.domain.value import PostId
from blog.persistence.error import handle_db_errors
from blog.persistence.mappers import row_to_tag
from blog.persistence.tables import post_tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @handle_db_errors
    async def find_by_post(self, post_id: PostId) -> list[PostTag]:
        """Find all tags of a post, in insertion order."""
        stmt = (
            select(post_tags_table)
            .where(post_tags_table.c.post_id == post_id)
            .order_by(post_tags_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(dict(row)) for row in result.mappings().all()]

    @handle_db_errors
    async def find_by_posts(self, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        """Fetch tag text for several posts with a single query.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to tag text
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, post_tags_table.c.tag)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.id)
        )
        result = await self.session.execute(stmt)

        tags: dict[PostId, list[str]] = defaultdict(list)
        for row in result.all():
            tags[PostId(row.post_id)].append(row.tag)
        return dict(tags)

    @handle_db_errors
    async def add_many(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Insert one row per tag, duplicates included.

        Args:
            post_id: Post ID
            tags: Tag text

        Returns:
            Inserted tags
        """
        if not tags:
            return []

        stmt = (
            post_tags_table.insert()
            .values([{"post_id": post_id, "tag": tag} for tag in tags])
            .returning(*post_tags_table.c)
        )
        result = await self.session.execute(stmt)
        saved = [row_to_tag(dict(row)) for row in result.mappings().all()]
        return sorted(saved, key=lambda tag: tag.id)

    @handle_db_errors
    async def replace_for_post(self, post_id: PostId, tags: list[str]) -> list[PostTag]:
        """Delete the current tags of a post and insert the new set.

        Both statements run in the caller's transaction, so other sessions
        see either the old set or the new one.
        """
        await self.session.execute(
            delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
        )
        return await self.add_many(post_id, tags)

    @handle_db_errors
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every tag of a post."""
        stmt = delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return result.rowcount
