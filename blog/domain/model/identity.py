"""Identity entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import AuthorSnapshot, UserId, Username


class Identity(DomainModel):
    """A registered user as resolved by the identity provider.

    Only ``id``, ``username`` and ``avatar_url`` are copied onto authored
    content; the rest is profile and login data.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    password_hash: Optional[str] = Field(default=None, repr=False)
    created_at: datetime = Field(default_factory=datetime.now)

    def snapshot(self) -> AuthorSnapshot:
        """Copy the display attributes for denormalized attribution."""
        return AuthorSnapshot(
            id=self.id, username=self.username, avatar_url=self.avatar_url
        )
