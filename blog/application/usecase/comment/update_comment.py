"""Update comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    message: str = "Comment updated successfully"
    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for updating a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID, and new content

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
            ValidationError: If content is empty or too long
        """
        updated = await self.comment_service.update_comment(
            comment_id=CommentId(request.comment_id),
            acting_user_id=UserId(request.user_id),
            content=request.content,
        )

        return UpdateCommentResponse(comment=CommentItem.from_domain(updated))
