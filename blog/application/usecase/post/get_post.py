"""Get post use cases."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for fetching a single published post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostItem:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        return PostItem.from_domain(post)


class GetUserPostsRequest(BaseModel):
    """Get user posts request."""

    user_id: int


class GetUserPostsResponse(BaseModel):
    """A user's published posts, newest first."""

    posts: list[PostItem]


class GetUserPostsUseCase:
    """Use case for listing the posts written by one user."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetUserPostsRequest) -> GetUserPostsResponse:
        posts = await self.post_service.get_posts_by_author(UserId(request.user_id))
        return GetUserPostsResponse(posts=[PostItem.from_domain(p) for p in posts])
