"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.security import require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: int | None = Field(default=None, ge=1)  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the comment threads of a post.

    Comments are listed flat in display order. Top-level comments come
    newest first and each is followed by its replies, newest first at
    every level, with `depth` and `reply_ids` describing the nesting.

    Args:
        post_id: Post ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Comments in display order, top-level IDs and total count
    """
    try:
        return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching comments",
        )


@router.get("/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: int,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment.

    Raises:
        HTTPException: If the comment does not exist
    """
    try:
        comment = await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error fetching comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching comment",
        )

    if comment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Comment not found: {comment_id}",
        )
    return comment


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post ID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, auth_token, authorization, "comment")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                author_id=user_id,
                content=request.content,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating comment",
        )


@router.put("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "edit comments"
    )

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=user_id, content=request.content
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while updating comment",
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply beneath it.

    Only the comment author can delete; replies from other users are
    removed along with it.

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "delete comments"
    )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while deleting comment",
        )
