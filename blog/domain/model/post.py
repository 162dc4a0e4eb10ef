"""Post entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import AuthorSnapshot, PostId, PostStatus, UserId


class Post(DomainModel):
    """Blog post.

    Like comments, a post carries a snapshot of its author taken when it
    was written. Comments and reactions only need to know that a post
    exists.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    excerpt: str = ""
    author_id: UserId
    author: AuthorSnapshot
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.PUBLISHED
    featured_image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED
