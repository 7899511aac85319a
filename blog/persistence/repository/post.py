"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.error import handle_db_errors
from blog.persistence.mappers import row_to_post
from blog.persistence.tables import posts_table

# Every column except the image payload, which is loaded on demand only
POST_COLUMNS = [column for column in posts_table.c if column.name != "image"]


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _search_filter(self, term: str):
        """Build the WHERE clause for a case-insensitive substring search."""
        pattern = f"%{_escape_like(term)}%"
        return or_(
            posts_table.c.title.ilike(pattern, escape="\\"),
            posts_table.c.body.ilike(pattern, escape="\\"),
        )

    @handle_db_errors
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: Post ID to look up

        Returns:
            Post if found, None otherwise
        """
        stmt = select(*POST_COLUMNS).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    @handle_db_errors
    async def search(self, term: str = "", limit: int = 10, offset: int = 0) -> List[Post]:
        """Find matching posts, newest first.

        Args:
            term: Substring matched against title and body (empty matches all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts
        """
        stmt = select(*POST_COLUMNS)
        if term:
            stmt = stmt.where(self._search_filter(term))
        stmt = (
            stmt.order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    @handle_db_errors
    async def count(self, term: str = "") -> int:
        """Count matching posts."""
        stmt = select(func.count()).select_from(posts_table)
        if term:
            stmt = stmt.where(self._search_filter(term))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @handle_db_errors
    async def create(self, title: str, body: str) -> Post:
        """Insert a post and return it with its generated id and timestamps.

        Args:
            title: Post title
            body: Post body

        Returns:
            Stored post
        """
        stmt = (
            posts_table.insert()
            .values(title=title, body=body)
            .returning(*POST_COLUMNS)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        return row_to_post(dict(row))

    @handle_db_errors
    async def update_content(
        self, post_id: PostId, title: str, body: str
    ) -> Optional[Post]:
        """Overwrite title and body.

        Args:
            post_id: Post ID
            title: New title
            body: New body

        Returns:
            Updated post, or None if it does not exist
        """
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(title=title, body=body, updated_at=func.now())
            .returning(*POST_COLUMNS)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    @handle_db_errors
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; tags and comments follow through ON DELETE CASCADE."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    @handle_db_errors
    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment the like counter by 1.

        Args:
            post_id: Post ID

        Returns:
            New like count, or None if the post does not exist
        """
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(like_count=posts_table.c.like_count + 1)
            .returning(posts_table.c.like_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @handle_db_errors
    async def set_image(self, post_id: PostId, image: bytes) -> bool:
        """Store or replace the image of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(image=image)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @handle_db_errors
    async def get_image(self, post_id: PostId) -> Optional[bytes]:
        """Load the image of a post (None when the post or image is missing)."""
        stmt = select(posts_table.c.image).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        image = result.scalar_one_or_none()
        return bytes(image) if image else None
