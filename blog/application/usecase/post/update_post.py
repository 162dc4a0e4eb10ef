"""Update post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields are left unchanged."""

    post_id: int
    user_id: int  # Current user ID (must be author)
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    tags: list[str] | None = None
    featured_image: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    message: str = "Post updated successfully"
    post: PostItem


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If a provided field is out of bounds
        """
        post = await self.post_service.update_post(
            post_id=PostId(request.post_id),
            acting_user_id=UserId(request.user_id),
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=request.tags,
            featured_image=request.featured_image,
        )
        return UpdatePostResponse(post=PostItem.from_domain(post))
