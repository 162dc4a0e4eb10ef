"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from blog.domain.model import Comment, Identity, Post
from blog.domain.value import CommentId, PostId, UserId, Username

# Keep spans local: nothing is sent or printed during tests
logfire.configure(send_to_logfire=False, console=False)


def make_identity(user_id: int, username: str | None = None) -> Identity:
    """Helper to build an identity for test users."""
    return Identity(
        id=UserId(user_id),
        username=Username(username or f"user{user_id}"),
        avatar_url=f"https://example.com/avatars/{user_id}.png",
    )


def make_comment(
    comment_id: int,
    post_id: int,
    author: Identity,
    parent_id: int | None = None,
    created_at: datetime | None = None,
    content: str | None = None,
) -> Comment:
    """Helper to build a stored comment with explicit ID and timestamp.

    Lets tests control recency order precisely instead of relying on
    wall-clock differences between calls.
    """
    created = created_at or datetime.now()
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId(post_id),
        author_id=author.id,
        author=author.snapshot(),
        content=content or f"Comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=created,
        updated_at=created,
    )


def make_post(
    post_id: int,
    author: Identity | None = None,
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> Post:
    """Helper to build a stored post, attributed to user 1 by default."""
    author = author or make_identity(1)
    created = created_at or datetime.now()
    return Post(
        id=PostId(post_id),
        title=f"Post number {post_id}",
        content=f"Body of post number {post_id}.",
        excerpt=f"Excerpt of post {post_id}",
        author_id=author.id,
        author=author.snapshot(),
        tags=tags or [],
        created_at=created,
        updated_at=created,
    )
