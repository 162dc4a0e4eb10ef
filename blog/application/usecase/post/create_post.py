"""Create post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import UserId

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: int  # User ID from authenticated user
    title: str
    content: str
    excerpt: str | None = None
    tags: list[str] = []
    featured_image: str | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    message: str = "Post created successfully"
    post: PostItem


class CreatePostUseCase:
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            ValidationError: If title, content or excerpt are out of bounds
            NotFoundError: If the author does not exist
        """
        post = await self.post_service.create_post(
            author_id=UserId(request.author_id),
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=request.tags,
            featured_image=request.featured_image,
        )
        return CreatePostResponse(post=PostItem.from_domain(post))
