"""Derived post views.

These are never persisted. List views carry a shortened body, detail views
carry the full body; both carry the tag list and a freshly counted number
of comments. The post body is serialized under the ``text`` key.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.comment import Comment
from blog.domain.model.common import ViewModel
from blog.domain.value import CommentId, PostId


class PostListItem(ViewModel):
    """Post as shown in list and search results."""

    id: PostId
    title: str
    body: str = Field(alias="text")  # Truncated preview
    tags: list[str]
    likes_count: int
    comments_count: int


class PostDetail(ViewModel):
    """Post as shown on its own page."""

    id: PostId
    title: str
    body: str = Field(alias="text")
    tags: list[str]
    likes_count: int
    comments_count: int


class PostPage(ViewModel):
    """One page of list items plus navigation flags."""

    posts: list[PostListItem]
    has_prev: bool
    has_next: bool
    last_page: int
    posts_count: int  # Items matching the search, across all pages


class CommentView(ViewModel):
    """Comment as returned to callers."""

    id: CommentId
    post_id: PostId
    text: str
    author: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            text=comment.text,
            author=comment.author,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
