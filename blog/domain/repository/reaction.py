"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.reaction import Reaction
from blog.domain.value import PostId, ReactionId, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity."""

    @abstractmethod
    async def next_id(self) -> ReactionId:
        """Allocate a fresh reaction ID."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Reaction]:
        """Find all reactions on a post."""
        pass

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a post.

        Returns:
            The reaction if the user has reacted, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction (create or update)."""
        pass

    @abstractmethod
    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        pass
