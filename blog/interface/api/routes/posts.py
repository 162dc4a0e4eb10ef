"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, Field, HttpUrl

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    GetUserPostsRequest,
    GetUserPostsResponse,
    GetUserPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.security import require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured_image: HttpUrl | None = None


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    tags: list[str] | None = None
    featured_image: HttpUrl | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    author: str | None = Query(default=None),
    tag: str | None = Query(default=None),
) -> ListPostsResponse:
    """List published posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        limit: Posts per page
        author: Filter by author username (substring, case-insensitive)
        tag: Filter by tag (substring, case-insensitive)

    Returns:
        One page of posts with pagination totals
    """
    try:
        return await list_posts_use_case.execute(
            ListPostsRequest(page=page, limit=limit, author=author, tag=tag)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/user/{user_id}", response_model=GetUserPostsResponse)
async def get_user_posts(
    user_id: int,
    get_user_posts_use_case: FromDishka[GetUserPostsUseCase],
) -> GetUserPostsResponse:
    """Get a user's published posts, newest first."""
    return await get_user_posts_use_case.execute(GetUserPostsRequest(user_id=user_id))


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostItem:
    """Get a single published post.

    Raises:
        HTTPException: If the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreatePostResponse:
    """Publish a new post.

    Requires authentication. The excerpt defaults to the start of the
    content.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, auth_token, authorization, "create posts")

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                title=request.title,
                content=request.content,
                excerpt=request.excerpt,
                tags=request.tags,
                featured_image=(
                    str(request.featured_image) if request.featured_image else None
                ),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating post",
        )


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdatePostResponse:
    """Update a post. Only the author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    user_id = require_user_id(jwt_service, auth_token, authorization, "edit posts")

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user_id,
                title=request.title,
                content=request.content,
                excerpt=request.excerpt,
                tags=request.tags,
                featured_image=(
                    str(request.featured_image) if request.featured_image else None
                ),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while updating post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeletePostResponse:
    """Delete a post along with its comments and reactions.

    Only the author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization, "delete posts")

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while deleting post",
        )
