"""Tag attached to a post."""

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, TagId


class PostTag(DomainModel):
    """Free-form tag row referencing its post.

    Tags are not unique per post: the same text may appear more than once.
    """

    id: TagId
    post_id: PostId
    tag: str = Field(min_length=1, max_length=255)
