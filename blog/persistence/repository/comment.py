"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.error import handle_db_errors
from blog.persistence.mappers import row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @handle_db_errors
    async def find_by_id(
        self, comment_id: CommentId, post_id: PostId
    ) -> Optional[Comment]:
        """Find a comment by ID within a post.

        Args:
            comment_id: Comment ID to look up
            post_id: Post the comment must belong to

        Returns:
            Comment if found, None otherwise
        """
        stmt = select(comments_table).where(
            comments_table.c.id == comment_id,
            comments_table.c.post_id == post_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    @handle_db_errors
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    @handle_db_errors
    async def create(
        self, post_id: PostId, text: str, author: Optional[str] = None
    ) -> Comment:
        """Insert a comment.

        Args:
            post_id: Post ID
            text: Comment text
            author: Optional author label

        Returns:
            Stored comment
        """
        stmt = (
            comments_table.insert()
            .values(post_id=post_id, text=text, author=author)
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        return row_to_comment(dict(result.mappings().one()))

    @handle_db_errors
    async def update_text(
        self, comment_id: CommentId, post_id: PostId, text: str
    ) -> Optional[Comment]:
        """Replace the text of a comment."""
        stmt = (
            update(comments_table)
            .where(
                comments_table.c.id == comment_id,
                comments_table.c.post_id == post_id,
            )
            .values(text=text, updated_at=func.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    @handle_db_errors
    async def delete(self, comment_id: CommentId, post_id: PostId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(
            comments_table.c.id == comment_id,
            comments_table.c.post_id == post_id,
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    @handle_db_errors
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    @handle_db_errors
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @handle_db_errors
    async def count_by_posts(self, post_ids: List[PostId]) -> dict[PostId, int]:
        """Count comments for several posts with one grouped query.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to comment count (posts without comments absent)
        """
        if not post_ids:
            return {}

        stmt = (
            select(comments_table.c.post_id, func.count().label("comment_count"))
            .where(comments_table.c.post_id.in_(post_ids))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id): row.comment_count for row in result.all()}
