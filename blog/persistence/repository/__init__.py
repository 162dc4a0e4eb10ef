"""Repository implementations."""

from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryIdentityProvider,
    InMemoryPostRegistry,
    InMemoryReactionRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryIdentityProvider",
    "InMemoryPostRegistry",
    "InMemoryReactionRepository",
]
