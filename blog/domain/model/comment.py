"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId


class Comment(DomainModel):
    """Flat comment on a post.

    Only the text is editable after creation.
    """

    id: CommentId
    post_id: PostId
    text: str = Field(min_length=1)
    author: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
