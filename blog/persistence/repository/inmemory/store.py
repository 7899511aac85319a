"""Shared state for the in-memory repositories."""

import itertools
from datetime import datetime

from blog.domain.model import Comment, Post, PostTag
from blog.domain.value import CommentId, PostId


class InMemoryStore:
    """Rows of every table, shared by the in-memory repositories.

    Repositories never await between reading and writing this state, so each
    repository call is atomic with respect to other coroutines.
    """

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.images: dict[PostId, bytes] = {}
        self.tags: list[PostTag] = []
        self.comments: dict[CommentId, Comment] = {}
        self._post_ids = itertools.count(1)
        self._tag_ids = itertools.count(1)
        self._comment_ids = itertools.count(1)

    def next_post_id(self) -> int:
        return next(self._post_ids)

    def next_tag_id(self) -> int:
        return next(self._tag_ids)

    def next_comment_id(self) -> int:
        return next(self._comment_ids)

    @staticmethod
    def now() -> datetime:
        return datetime.now()

    def drop_post(self, post_id: PostId) -> bool:
        """Remove a post with its image, tags and comments."""
        if self.posts.pop(post_id, None) is None:
            return False
        self.images.pop(post_id, None)
        self.tags = [tag for tag in self.tags if tag.post_id != post_id]
        self.comments = {
            comment_id: comment
            for comment_id, comment in self.comments.items()
            if comment.post_id != post_id
        }
        return True
