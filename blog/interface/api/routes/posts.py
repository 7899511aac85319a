"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile, status
from pydantic import BaseModel

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetImageRequest,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostImageUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
    UploadImageRequest,
)
from blog.domain.model import PostDetail, PostPage

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(BaseModel):
    """API request for creating or updating a post.

    Blank values are accepted here and rejected by the domain with a 400.
    """

    title: str
    text: str
    tags: list[str] | None = None


@router.get("", response_model=PostPage)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    search: str = Query(default=""),
    page_number: int = Query(default=1, alias="pageNumber"),
    page_size: int = Query(default=0, alias="pageSize"),
) -> PostPage:
    """Search and paginate posts.

    Out-of-range paging values are clamped, never rejected.

    Args:
        list_posts_use_case: List posts use case from DI
        search: Substring matched against title and body
        page_number: 1-indexed page
        page_size: Posts per page (below 1 selects the default)

    Returns:
        Page of posts with navigation flags
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(search=search, page_number=page_number, page_size=page_size)
    )


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostDetail:
    """Get a single post with its full body.

    Raises:
        HTTPException: If post not found
    """
    post = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post not found: {post_id}",
        )
    return post


@router.post("", response_model=PostDetail, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostDetail:
    """Create a new post with its tags."""
    logfire.info("POST /api/posts", title=request.title)
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title, body=request.text, tags=request.tags or []
        )
    )


@router.put("/{post_id}", response_model=PostDetail)
async def update_post(
    post_id: int,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostDetail:
    """Overwrite a post's title and body and replace its tag set."""
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            title=request.title,
            body=request.text,
            tags=request.tags or [],
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> None:
    """Delete a post together with its comments and tags."""
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))


@router.post("/{post_id}/likes", response_model=int)
async def like_post(
    post_id: int,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> int:
    """Add one like and return the new like count."""
    return await like_post_use_case.execute(LikePostRequest(post_id=post_id))


@router.put("/{post_id}/image")
async def upload_image(
    post_id: int,
    post_image_use_case: FromDishka[PostImageUseCase],
    image: UploadFile = File(...),
) -> Response:
    """Store or replace the image of a post (multipart field ``image``)."""
    content = await image.read()
    await post_image_use_case.execute(
        UploadImageRequest(post_id=post_id, image=content)
    )
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{post_id}/image")
async def get_image(
    post_id: int,
    post_image_use_case: FromDishka[PostImageUseCase],
) -> Response:
    """Return the raw image bytes of a post.

    Raises:
        HTTPException: If the post or its image is missing
    """
    image = await post_image_use_case.fetch(GetImageRequest(post_id=post_id))
    if image is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Image not found for post: {post_id}",
        )
    return Response(content=image, media_type="image/jpeg")
