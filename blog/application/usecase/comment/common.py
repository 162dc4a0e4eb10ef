"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Comment, CommentNode


class AuthorItem(BaseModel):
    """Author attribution as recorded on the comment."""

    id: int
    username: str
    avatar_url: str | None


class CommentItem(BaseModel):
    """A single comment in a response."""

    comment_id: int
    post_id: int
    author_id: int
    author: AuthorItem
    content: str
    parent_id: int | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            post_id=comment.post_id,
            author_id=comment.author_id,
            author=AuthorItem(
                id=comment.author.id,
                username=comment.author.username.root,
                avatar_url=comment.author.avatar_url,
            ),
            content=comment.content,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class ThreadedCommentItem(CommentItem):
    """A comment placed in its thread.

    Threads are sent flat, in display order, so response depth never
    grows with the reply chain: ``depth`` is 0 for top-level comments and
    ``reply_ids`` lists direct replies in display order.
    """

    depth: int
    reply_ids: list[int]


def flatten_threads(roots: list[CommentNode]) -> list[ThreadedCommentItem]:
    """Flatten a comment forest into display order (pre-order)."""
    return [
        ThreadedCommentItem(
            **CommentItem.from_domain(node.comment).model_dump(),
            depth=depth,
            reply_ids=[reply.comment.id for reply in node.replies],
        )
        for root in roots
        for node, depth in root.walk()
    ]
