"""List posts use case."""

from pydantic import BaseModel, Field

from blog.domain.service import PostService

from .common import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    author: str | None = None  # Substring of the author's username
    tag: str | None = None  # Substring of any tag


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total_posts: int
    current_page: int
    total_pages: int


class ListPostsUseCase:
    """Use case for listing published posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            One page of posts, newest first
        """
        page = await self.post_service.list_posts(
            page=request.page,
            limit=request.limit,
            author=request.author,
            tag=request.tag,
        )
        return ListPostsResponse(
            posts=[PostItem.from_domain(post) for post in page.posts],
            total_posts=page.total_posts,
            current_page=page.current_page,
            total_pages=page.total_pages,
        )
