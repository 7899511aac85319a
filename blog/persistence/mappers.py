"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from blog.domain.model import Comment, Post, PostTag
from blog.domain.value import CommentId, PostId, TagId


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    The image column is never part of the model and is ignored if present.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        body=row["body"],
        like_count=row["like_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_tag(row: Dict[str, Any]) -> PostTag:
    """Convert database row to PostTag domain model."""
    return PostTag(
        id=TagId(row["id"]),
        post_id=PostId(row["post_id"]),
        tag=row["tag"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        text=row["text"],
        author=row.get("author"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
