"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .identity import InMemoryIdentityProvider
from .post import InMemoryPostRegistry
from .reaction import InMemoryReactionRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryIdentityProvider",
    "InMemoryPostRegistry",
    "InMemoryReactionRepository",
]
