"""Get reactions use case."""

from pydantic import BaseModel

from blog.domain.service import ReactionService
from blog.domain.value import PostId, ReactionType, UserId


class GetReactionsRequest(BaseModel):
    """Get reactions request."""

    post_id: int


class GetReactionsResponse(BaseModel):
    """Reaction counts for a post."""

    post_id: int
    reactions: dict[ReactionType, int]
    total_reactions: int


class GetReactionsUseCase:
    """Use case for counting a post's reactions by type."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionsRequest) -> GetReactionsResponse:
        """Execute get reactions flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        summary = await self.reaction_service.get_reaction_summary(
            PostId(request.post_id)
        )
        return GetReactionsResponse(
            post_id=summary.post_id,
            reactions=summary.counts,
            total_reactions=summary.total,
        )


class GetUserReactionRequest(BaseModel):
    """Get user reaction request."""

    post_id: int
    user_id: int


class GetUserReactionResponse(BaseModel):
    """The current user's reaction on a post."""

    post_id: int
    user_reaction: ReactionType | None


class GetUserReactionUseCase:
    """Use case for looking up the current user's reaction on a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(
        self, request: GetUserReactionRequest
    ) -> GetUserReactionResponse:
        reaction_type = await self.reaction_service.get_user_reaction(
            PostId(request.post_id), UserId(request.user_id)
        )
        return GetUserReactionResponse(
            post_id=request.post_id, user_reaction=reaction_type
        )
