"""Delete comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str = "Comment deleted successfully"
    deleted: int  # Target comment plus all of its replies


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies by other users are removed along with the target.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If user doesn't own the comment
            CorruptedDataError: If the reply chain loops
        """
        deleted = await self.comment_service.delete_comment(
            comment_id=CommentId(request.comment_id),
            acting_user_id=UserId(request.user_id),
        )
        return DeleteCommentResponse(deleted=deleted)
