"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.identity import IdentityProvider
from blog.domain.repository.post import PostRegistry
from blog.domain.repository.reaction import ReactionRepository

__all__ = [
    "CommentRepository",
    "IdentityProvider",
    "PostRegistry",
    "ReactionRepository",
]
