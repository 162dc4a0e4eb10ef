"""React to post use case."""

from pydantic import BaseModel

from blog.domain.service import ReactionService
from blog.domain.value import PostId, ReactionAction, ReactionType, UserId

_MESSAGES = {
    ReactionAction.ADDED: "Reaction added",
    ReactionAction.UPDATED: "Reaction updated",
    ReactionAction.REMOVED: "Reaction removed",
}


class ReactRequest(BaseModel):
    """React request."""

    post_id: int
    user_id: int
    type: ReactionType


class ReactResponse(BaseModel):
    """React response."""

    message: str
    action: ReactionAction
    type: ReactionType | None


class ReactUseCase:
    """Use case for adding, switching or toggling off a reaction."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize react use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Execute react flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        result = await self.reaction_service.react(
            PostId(request.post_id), UserId(request.user_id), request.type
        )
        return ReactResponse(
            message=_MESSAGES[result.action], action=result.action, type=result.type
        )


class RemoveReactionRequest(BaseModel):
    """Remove reaction request."""

    post_id: int
    user_id: int


class RemoveReactionUseCase:
    """Use case for removing the current user's reaction on a post."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> None:
        """Execute remove reaction flow.

        Raises:
            NotFoundError: If the user has not reacted to the post
        """
        await self.reaction_service.remove_reaction(
            PostId(request.post_id), UserId(request.user_id)
        )
