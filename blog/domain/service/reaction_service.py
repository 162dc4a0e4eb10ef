"""Reaction domain service."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from blog.domain.error import NotFoundError
from blog.domain.model import Reaction
from blog.domain.repository import PostRegistry, ReactionRepository
from blog.domain.value import PostId, ReactionAction, ReactionType, UserId

from .base import Service


class ReactionSummary(BaseModel):
    """Reaction counts for a post, one entry per reaction type."""

    post_id: PostId
    counts: dict[ReactionType, int]
    total: int


class ReactionResult(BaseModel):
    """Outcome of a react call; type is None once the reaction is removed."""

    action: ReactionAction
    type: ReactionType | None


class ReactionService(Service):
    """Domain service for post reactions."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        post_registry: PostRegistry,
        collaborator_timeout: float = 2.0,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            post_registry: Registry answering whether a post exists
            collaborator_timeout: Seconds allowed for each registry lookup
        """
        self.reaction_repository = reaction_repository
        self.post_registry = post_registry
        self.collaborator_timeout = collaborator_timeout

    async def _ensure_post_exists(self, post_id: PostId) -> None:
        exists = await self.call_collaborator(
            "post_registry", self.post_registry.exists(post_id)
        )
        if not exists:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))

    async def get_reaction_summary(self, post_id: PostId) -> ReactionSummary:
        """Count a post's reactions by type.

        Every reaction type is present in the result, zero when unused.

        Raises:
            NotFoundError: If the post does not exist
            UnavailableError: If the post registry could not be reached
        """
        with logfire.span("reaction_service.get_reaction_summary", post_id=post_id):
            await self._ensure_post_exists(post_id)
            reactions = await self.reaction_repository.find_by_post(post_id)

            counts = {reaction_type: 0 for reaction_type in ReactionType}
            for reaction in reactions:
                counts[reaction.type] += 1

            return ReactionSummary(
                post_id=post_id, counts=counts, total=len(reactions)
            )

    async def get_user_reaction(
        self, post_id: PostId, user_id: UserId
    ) -> ReactionType | None:
        """Get the type of a user's reaction on a post, if any."""
        reaction = await self.reaction_repository.find_by_post_and_user(
            post_id, user_id
        )
        return reaction.type if reaction else None

    async def react(
        self, post_id: PostId, user_id: UserId, reaction_type: ReactionType
    ) -> ReactionResult:
        """Add, switch or toggle off a user's reaction on a post.

        Reacting with the type the user already holds removes it; reacting
        with another type replaces it.

        Args:
            post_id: Post ID
            user_id: Reacting user
            reaction_type: Reaction to apply

        Returns:
            Which action was taken and the resulting reaction type

        Raises:
            NotFoundError: If the post does not exist
            UnavailableError: If the post registry could not be reached
        """
        with logfire.span(
            "reaction_service.react",
            post_id=post_id,
            user_id=user_id,
            reaction_type=reaction_type.value,
        ):
            await self._ensure_post_exists(post_id)
            existing = await self.reaction_repository.find_by_post_and_user(
                post_id, user_id
            )

            if existing is None:
                await self.reaction_repository.save(
                    Reaction(
                        id=await self.reaction_repository.next_id(),
                        post_id=post_id,
                        user_id=user_id,
                        type=reaction_type,
                        created_at=datetime.now(),
                    )
                )
                result = ReactionResult(action=ReactionAction.ADDED, type=reaction_type)
            elif existing.type == reaction_type:
                await self.reaction_repository.delete(existing.id)
                result = ReactionResult(action=ReactionAction.REMOVED, type=None)
            else:
                await self.reaction_repository.save(
                    existing.model_copy(
                        update={"type": reaction_type, "created_at": datetime.now()}
                    )
                )
                result = ReactionResult(
                    action=ReactionAction.UPDATED, type=reaction_type
                )

            logfire.info(
                "Reaction applied",
                post_id=post_id,
                user_id=user_id,
                action=result.action.value,
            )
            return result

    async def remove_reaction(self, post_id: PostId, user_id: UserId) -> None:
        """Remove a user's reaction from a post.

        Raises:
            NotFoundError: If the user has not reacted to the post
        """
        with logfire.span(
            "reaction_service.remove_reaction", post_id=post_id, user_id=user_id
        ):
            existing = await self.reaction_repository.find_by_post_and_user(
                post_id, user_id
            )
            if existing is None:
                logfire.warn("Reaction not found", post_id=post_id, user_id=user_id)
                raise NotFoundError("Reaction", f"post {post_id} user {user_id}")

            await self.reaction_repository.delete(existing.id)
            logfire.info("Reaction removed", post_id=post_id, user_id=user_id)
