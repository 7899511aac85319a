"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .like_post import LikePostRequest, LikePostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .post_image import GetImageRequest, PostImageUseCase, UploadImageRequest
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetImageRequest",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostImageUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "UploadImageRequest",
]
