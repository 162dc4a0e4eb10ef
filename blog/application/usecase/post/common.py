"""Response models shared by post use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.comment.common import AuthorItem
from blog.domain.model import Post


class PostItem(BaseModel):
    """A post in a response."""

    post_id: int
    title: str
    content: str
    excerpt: str
    author_id: int
    author: AuthorItem
    tags: list[str]
    status: str
    featured_image: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            post_id=post.id,
            title=post.title,
            content=post.content,
            excerpt=post.excerpt,
            author_id=post.author_id,
            author=AuthorItem(
                id=post.author.id,
                username=post.author.username.root,
                avatar_url=post.author.avatar_url,
            ),
            tags=post.tags,
            status=post.status.value,
            featured_image=post.featured_image,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
