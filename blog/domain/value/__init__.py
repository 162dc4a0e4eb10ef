"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    CommentId,
    PostId,
    ReactionId,
    UserId,
)
from blog.domain.value.types import (
    BIO_MAX_LENGTH,
    COMMENT_CONTENT_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    POST_CONTENT_MIN_LENGTH,
    POST_EXCERPT_MAX_LENGTH,
    POST_EXCERPT_PREVIEW_LENGTH,
    POST_TITLE_MAX_LENGTH,
    POST_TITLE_MIN_LENGTH,
    USERNAME_MIN_LENGTH,
    AuthorSnapshot,
    PostStatus,
    ReactionAction,
    ReactionType,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReactionId",
    # Types
    "BIO_MAX_LENGTH",
    "COMMENT_CONTENT_MAX_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "POST_CONTENT_MIN_LENGTH",
    "POST_EXCERPT_MAX_LENGTH",
    "POST_EXCERPT_PREVIEW_LENGTH",
    "POST_TITLE_MAX_LENGTH",
    "POST_TITLE_MIN_LENGTH",
    "USERNAME_MIN_LENGTH",
    "AuthorSnapshot",
    "PostStatus",
    "ReactionAction",
    "ReactionType",
    "Username",
]
