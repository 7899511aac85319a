"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.model import CommentView

router = APIRouter(prefix="/api/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str
    author: str | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str


@router.get("/{post_id}/comments", response_model=list[CommentView])
async def list_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> list[CommentView]:
    """List the comments of a post, oldest first."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.get("/{post_id}/comments/{comment_id}", response_model=CommentView)
async def get_comment(
    post_id: int,
    comment_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> CommentView:
    """Get one comment of a post.

    Raises:
        HTTPException: If the comment does not exist under the post
    """
    comment = await get_comments_use_case.get_one(
        GetCommentsRequest(post_id=post_id, comment_id=comment_id)
    )
    if comment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Comment not found: {comment_id}",
        )
    return comment


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentView:
    """Add a comment to a post."""
    return await create_comment_use_case.execute(
        CreateCommentRequest(post_id=post_id, text=request.text, author=request.author)
    )


@router.put("/{post_id}/comments/{comment_id}", response_model=CommentView)
async def update_comment(
    post_id: int,
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentView:
    """Replace the text of a comment."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(post_id=post_id, comment_id=comment_id, text=request.text)
    )


@router.delete(
    "/{post_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_comment(
    post_id: int,
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a single comment."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(post_id=post_id, comment_id=comment_id)
    )
