"""Post aggregate root.

A post owns its tags and comments; deleting the post removes both.
The optional image payload is stored alongside the post row but is read
and written through dedicated repository operations, so it is not part of
this model.
"""

from datetime import datetime

from pydantic import Field, model_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Post":
        """updated_at never precedes created_at."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self
