"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, TagId
from blog.domain.value.pagination import (
    PageWindow,
    last_page_for,
    normalize_page_size,
)

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "TagId",
    # Pagination
    "PageWindow",
    "last_page_for",
    "normalize_page_size",
]
