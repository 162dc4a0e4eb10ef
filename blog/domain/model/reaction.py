"""Reaction entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, ReactionId, ReactionType, UserId


class Reaction(DomainModel):
    """A user's reaction to a post.

    A user holds at most one reaction per post; reacting again with a
    different type replaces it.
    """

    id: ReactionId
    post_id: PostId
    user_id: UserId
    type: ReactionType
    created_at: datetime = Field(default_factory=datetime.now)
