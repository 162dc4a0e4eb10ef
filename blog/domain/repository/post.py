"""Post registry interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRegistry(ABC):
    """Registry of posts.

    Comments and reactions only ask whether a post exists; the post
    service reads and writes the full records.
    """

    @abstractmethod
    async def exists(self, post_id: PostId) -> bool:
        """Check whether a published post exists."""
        pass

    @abstractmethod
    async def next_id(self) -> PostId:
        """Allocate a fresh post ID (never reused)."""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all published posts, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Register or replace a post."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Remove a post."""
        pass
