"""In-memory reaction repository."""

from typing import Optional

from blog.domain.model.reaction import Reaction
from blog.domain.repository.reaction import ReactionRepository
from blog.domain.value import PostId, ReactionId, UserId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository."""

    def __init__(self) -> None:
        self._reactions: dict[ReactionId, Reaction] = {}
        self._last_id = 0

    async def next_id(self) -> ReactionId:
        """Allocate the next reaction ID."""
        self._last_id += 1
        return ReactionId(self._last_id)

    async def find_by_post(self, post_id: PostId) -> list[Reaction]:
        """Find all reactions on a post."""
        return [r for r in self._reactions.values() if r.post_id == post_id]

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a post."""
        for reaction in self._reactions.values():
            if reaction.post_id == post_id and reaction.user_id == user_id:
                return reaction
        return None

    async def save(self, reaction: Reaction) -> Reaction:
        """Save or update a reaction."""
        self._reactions[reaction.id] = reaction
        self._last_id = max(self._last_id, reaction.id)
        return reaction

    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        self._reactions.pop(reaction_id, None)
