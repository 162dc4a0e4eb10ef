"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject, ValueObject
from blog.domain.value.identifiers import UserId

COMMENT_CONTENT_MAX_LENGTH = 1000

POST_TITLE_MIN_LENGTH = 5
POST_TITLE_MAX_LENGTH = 200
POST_CONTENT_MIN_LENGTH = 10
POST_EXCERPT_MAX_LENGTH = 300
POST_EXCERPT_PREVIEW_LENGTH = 150

USERNAME_MIN_LENGTH = 3
BIO_MAX_LENGTH = 500
PASSWORD_MIN_LENGTH = 6


class ReactionType(str, Enum):
    """Emoji-style reaction a user can leave on a post."""

    LIKE = "like"
    LOVE = "love"
    LAUGH = "laugh"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"


class PostStatus(str, Enum):
    """Visibility of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ReactionAction(str, Enum):
    """Outcome of reacting to a post."""

    ADDED = "added"
    UPDATED = "updated"
    REMOVED = "removed"


class Username(RootValueObject[str]):
    """Public display name of a user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class AuthorSnapshot(ValueObject):
    """Author attributes copied onto a comment when it is created.

    The snapshot is never refreshed: later changes to the identity record
    do not rewrite the attribution of existing comments.
    """

    id: UserId
    username: Username
    avatar_url: str | None = None
