"""In-memory post registry."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRegistry
from blog.domain.value import PostId


class InMemoryPostRegistry(PostRegistry):
    """In-memory implementation of PostRegistry."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._last_id = 0

    async def exists(self, post_id: PostId) -> bool:
        """Check whether a published post exists."""
        post = self._posts.get(post_id)
        return post is not None and post.is_published

    async def next_id(self) -> PostId:
        """Allocate the next post ID."""
        self._last_id += 1
        return PostId(self._last_id)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all published posts, newest first."""
        published = [p for p in self._posts.values() if p.is_published]
        return sorted(published, key=lambda p: (p.created_at, p.id), reverse=True)

    async def save(self, post: Post) -> Post:
        """Register or replace a post."""
        self._posts[post.id] = post
        self._last_id = max(self._last_id, post.id)
        return post

    async def delete(self, post_id: PostId) -> None:
        """Remove a post."""
        self._posts.pop(post_id, None)
