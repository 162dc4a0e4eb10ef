"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment storage. The collection is flat:
    each comment carries a parent pointer and threads are rebuilt by the
    comment service. Implementations live in the persistence layer.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Exclusive access to the collection.

        Every read-validate-write sequence on comments runs inside one
        transaction so no caller observes a half-applied change.
        """
        pass

    @abstractmethod
    async def next_id(self) -> CommentId:
        """Allocate a fresh comment ID.

        IDs increase monotonically and are never reused, even after the
        comment holding one is deleted.
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, in insertion order.

        Args:
            post_id: The post ID

        Returns:
            Flat list of the post's comments
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Remove a single comment record.

        Replies are not touched; cascading is the comment service's job.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all stored comments."""
        pass
