"""Create comment use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author_id: int  # User ID from authenticated user
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str = "Comment created successfully"
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment service checks the post, the parent comment and the
        author before anything is stored.

        Args:
            request: Create comment request

        Returns:
            Created comment with its author snapshot

        Raises:
            NotFoundError: If post, parent comment or author not found
            ValidationError: If content is empty or too long
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            author_id=UserId(request.author_id),
            content=request.content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )

        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
