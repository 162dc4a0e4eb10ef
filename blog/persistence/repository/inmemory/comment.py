"""In-memory comment repository."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository.

    Comments live in an insertion-ordered dict; a single lock serializes
    transactions over the whole collection.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Hold the collection lock for the duration of the block."""
        async with self._lock:
            yield

    async def next_id(self) -> CommentId:
        """Allocate the next comment ID."""
        self._last_id += 1
        return CommentId(self._last_id)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in insertion order."""
        return [c for c in self._comments.values() if c.post_id == post_id]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment."""
        return [c for c in self._comments.values() if c.parent_id == parent_id]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment.

        Keeps explicitly assigned IDs (e.g. seed data) clear of the counter.
        """
        self._comments[comment.id] = comment
        self._last_id = max(self._last_id, comment.id)
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def count(self) -> int:
        """Count all stored comments."""
        return len(self._comments)
