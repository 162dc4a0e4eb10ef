"""Delete post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int
    user_id: int  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str = "Post deleted successfully"


class DeletePostUseCase:
    """Use case for deleting a post with its comments and reactions."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If user doesn't own the post
        """
        await self.post_service.delete_post(
            post_id=PostId(request.post_id), acting_user_id=UserId(request.user_id)
        )
        return DeletePostResponse()
