"""Get comments use case."""

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId

from .common import CommentItem, ThreadedCommentItem, flatten_threads


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: int


class GetCommentsResponse(BaseModel):
    """Get comments response.

    ``comments`` is the whole forest in display order: each top-level
    comment (newest first) followed by its replies, depth first.
    """

    post_id: int
    root_ids: list[int]
    comments: list[ThreadedCommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for getting the threaded comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID

        Returns:
            Comments of every level in display order, with the IDs of the
            top-level ones

        Raises:
            NotFoundError: If the post does not exist
        """
        roots = await self.comment_service.get_comment_tree(PostId(request.post_id))
        comments = flatten_threads(roots)

        return GetCommentsResponse(
            post_id=request.post_id,
            root_ids=[root.comment.id for root in roots],
            comments=comments,
            total=len(comments),
        )


class GetCommentRequest(BaseModel):
    """Get single comment request."""

    comment_id: int


class GetCommentUseCase:
    """Use case for fetching one comment by ID."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem | None:
        """Execute get comment flow.

        Returns:
            The comment, or None if it does not exist
        """
        comment = await self.comment_service.get_comment_by_id(
            CommentId(request.comment_id)
        )
        return CommentItem.from_domain(comment) if comment else None
