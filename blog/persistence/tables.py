"""SQLAlchemy table definitions for the blog.

Table definitions are used with SQLAlchemy Core; rows are mapped to the
immutable domain models by hand (see ``mappers``). They match the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("title", String(255), nullable=False),
    Column("body", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("image", LargeBinary, nullable=True),  # Raw upload, NULL when absent
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    CheckConstraint("like_count >= 0", name="ck_posts_like_count"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc(), posts_table.c.id.desc())

# ============================================================================
# POST TAGS TABLE (duplicates allowed, no uniqueness constraint)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tag", String(255), nullable=False),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)

# ============================================================================
# COMMENTS TABLE (flat, no threading)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("text", Text, nullable=False),
    Column("author", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)
