"""Comment entity.

Comments are threaded discussions on posts with unlimited depth.
They are stored flat with a parent pointer; the tree is rebuilt on read.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    AuthorSnapshot,
    CommentId,
    PostId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - post_id: Shared by every comment in a thread

    Only content and updated_at ever change after creation.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author: AuthorSnapshot
    content: str = Field(min_length=1, max_length=COMMENT_CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None


@dataclass
class CommentNode:
    """Node in a materialized comment thread.

    Each node exclusively owns its list of replies.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    def walk(self) -> Iterator[tuple["CommentNode", int]]:
        """Yield this node and its descendants in display order.

        Pre-order, replies in stored order, each paired with its depth
        below this node (0 for the node itself). Uses an explicit stack so
        arbitrarily deep reply chains are safe.
        """
        stack: list[tuple[CommentNode, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((reply, depth + 1) for reply in reversed(node.replies))

    def count(self) -> int:
        """Number of comments in this subtree, including this one."""
        return sum(1 for _ in self.walk())
