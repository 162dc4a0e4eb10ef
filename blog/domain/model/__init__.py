"""Domain model entities for the blog."""

from blog.domain.model.comment import Comment, CommentNode
from blog.domain.model.identity import Identity
from blog.domain.model.post import Post
from blog.domain.model.reaction import Reaction

__all__ = [
    "Comment",
    "CommentNode",
    "Identity",
    "Post",
    "Reaction",
]
