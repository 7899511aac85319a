"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.model.tag import PostTag
from blog.domain.model.view import CommentView, PostDetail, PostListItem, PostPage

__all__ = [
    "Post",
    "PostTag",
    "Comment",
    "PostListItem",
    "PostDetail",
    "PostPage",
    "CommentView",
]
