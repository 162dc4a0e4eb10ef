"""Post domain service."""

import math
from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model import Post
from blog.domain.repository import (
    CommentRepository,
    IdentityProvider,
    PostRegistry,
    ReactionRepository,
)
from blog.domain.value import (
    POST_CONTENT_MIN_LENGTH,
    POST_EXCERPT_MAX_LENGTH,
    POST_EXCERPT_PREVIEW_LENGTH,
    POST_TITLE_MAX_LENGTH,
    POST_TITLE_MIN_LENGTH,
    PostId,
    UserId,
)

from .base import Service


class PostPage(BaseModel):
    """One page of published posts."""

    posts: list[Post]
    total_posts: int
    current_page: int
    total_pages: int


def _normalize_title(title: str) -> str:
    trimmed = title.strip()
    if not POST_TITLE_MIN_LENGTH <= len(trimmed) <= POST_TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be between {POST_TITLE_MIN_LENGTH} and "
            f"{POST_TITLE_MAX_LENGTH} characters"
        )
    return trimmed


def _normalize_content(content: str) -> str:
    trimmed = content.strip()
    if len(trimmed) < POST_CONTENT_MIN_LENGTH:
        raise ValidationError(
            f"Content must be at least {POST_CONTENT_MIN_LENGTH} characters"
        )
    return trimmed


def _normalize_excerpt(excerpt: Optional[str], content: str) -> str:
    """Use the given excerpt, or preview the start of the content."""
    if excerpt is None or not excerpt.strip():
        return content[:POST_EXCERPT_PREVIEW_LENGTH] + "..."
    trimmed = excerpt.strip()
    if len(trimmed) > POST_EXCERPT_MAX_LENGTH:
        raise ValidationError(
            f"Excerpt must be less than {POST_EXCERPT_MAX_LENGTH} characters"
        )
    return trimmed


def _clean_tags(tags: list[str]) -> list[str]:
    return [tag.strip() for tag in tags if tag.strip()]


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_registry: PostRegistry,
        identity_provider: IdentityProvider,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        collaborator_timeout: float = 2.0,
    ) -> None:
        """Initialize post service.

        Args:
            post_registry: Post registry
            identity_provider: Resolves authors to their display attributes
            comment_repository: Comment repository (cleared on post delete)
            reaction_repository: Reaction repository (cleared on post delete)
            collaborator_timeout: Seconds allowed for each identity lookup
        """
        self.post_registry = post_registry
        self.identity_provider = identity_provider
        self.comment_repository = comment_repository
        self.reaction_repository = reaction_repository
        self.collaborator_timeout = collaborator_timeout

    async def list_posts(
        self,
        page: int = 1,
        limit: int = 10,
        author: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> PostPage:
        """List published posts, newest first, one page at a time.

        Args:
            page: 1-based page number
            limit: Posts per page
            author: Case-insensitive substring of the author's username
            tag: Case-insensitive substring of any of the post's tags

        Returns:
            The requested page plus totals over all matching posts

        Raises:
            ValidationError: If page or limit is below 1
        """
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")

        with logfire.span(
            "post_service.list_posts", page=page, limit=limit, author=author, tag=tag
        ):
            posts = await self.post_registry.find_all()

            if author:
                needle = author.lower()
                posts = [p for p in posts if needle in p.author.username.root.lower()]
            if tag:
                needle = tag.lower()
                posts = [p for p in posts if any(needle in t.lower() for t in p.tags)]

            start = (page - 1) * limit
            return PostPage(
                posts=posts[start : start + limit],
                total_posts=len(posts),
                current_page=page,
                total_pages=math.ceil(len(posts) / limit),
            )

    async def get_post(self, post_id: PostId) -> Post:
        """Get a published post.

        Raises:
            NotFoundError: If the post does not exist or is not published
        """
        post = await self.post_registry.find_by_id(post_id)
        if post is None or not post.is_published:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_posts_by_author(self, author_id: UserId) -> list[Post]:
        """Get a user's published posts, newest first."""
        posts = await self.post_registry.find_all()
        return [p for p in posts if p.author_id == author_id]

    async def _get_owned_post(self, post_id: PostId, acting_user_id: UserId) -> Post:
        post = await self.post_registry.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))
        if post.author_id != acting_user_id:
            logfire.warn(
                "Post modification by non-author rejected",
                post_id=post_id,
                author_id=post.author_id,
                acting_user_id=acting_user_id,
            )
            raise NotAuthorizedError("post", str(post_id), str(acting_user_id))
        return post

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        tags: Optional[list[str]] = None,
        featured_image: Optional[str] = None,
    ) -> Post:
        """Publish a new post.

        Args:
            author_id: Author user ID
            title: Title, 5-200 characters after trimming
            content: Body, at least 10 characters after trimming
            excerpt: Summary (up to 300 characters); previewed from the
                content when omitted
            tags: Tags, blanks dropped
            featured_image: Image URL

        Returns:
            Created post, carrying a snapshot of its author

        Raises:
            ValidationError: If title, content or excerpt are out of bounds
            NotFoundError: If the author does not exist
            UnavailableError: If the identity provider could not be reached
        """
        with logfire.span("post_service.create_post", author_id=author_id):
            clean_title = _normalize_title(title)
            clean_content = _normalize_content(content)
            clean_excerpt = _normalize_excerpt(excerpt, clean_content)

            author = await self.call_collaborator(
                "identity_provider", self.identity_provider.resolve(author_id)
            )

            now = datetime.now()
            post = await self.post_registry.save(
                Post(
                    id=await self.post_registry.next_id(),
                    title=clean_title,
                    content=clean_content,
                    excerpt=clean_excerpt,
                    author_id=author.id,
                    author=author.snapshot(),
                    tags=_clean_tags(tags or []),
                    featured_image=featured_image,
                    created_at=now,
                    updated_at=now,
                )
            )

            logfire.info("Post created", post_id=post.id, author_id=author_id)
            return post

    async def update_post(
        self,
        post_id: PostId,
        acting_user_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[list[str]] = None,
        featured_image: Optional[str] = None,
    ) -> Post:
        """Edit a post. Fields left as None keep their value.

        A new content without a new excerpt regenerates the excerpt.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the acting user is not the author
            ValidationError: If a provided field is out of bounds
        """
        with logfire.span(
            "post_service.update_post", post_id=post_id, acting_user_id=acting_user_id
        ):
            post = await self._get_owned_post(post_id, acting_user_id)

            changes: dict = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = _normalize_title(title)
            if content is not None:
                changes["content"] = _normalize_content(content)
            if excerpt is not None or content is not None:
                changes["excerpt"] = _normalize_excerpt(
                    excerpt, changes.get("content", post.content)
                )
            if tags is not None:
                changes["tags"] = _clean_tags(tags)
            if featured_image is not None:
                changes["featured_image"] = featured_image

            updated = await self.post_registry.save(post.model_copy(update=changes))

            logfire.info(
                "Post updated", post_id=post_id, fields=sorted(changes.keys())
            )
            return updated

    async def delete_post(self, post_id: PostId, acting_user_id: UserId) -> None:
        """Delete a post together with its comments and reactions.

        Runs inside the comment transaction so no comment can be appended
        to the post while it is being removed.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the acting user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=post_id, acting_user_id=acting_user_id
        ):
            async with self.comment_repository.transaction():
                await self._get_owned_post(post_id, acting_user_id)

                comments = await self.comment_repository.find_by_post(post_id)
                for comment in comments:
                    await self.comment_repository.delete(comment.id)

                reactions = await self.reaction_repository.find_by_post(post_id)
                for reaction in reactions:
                    await self.reaction_repository.delete(reaction.id)

                await self.post_registry.delete(post_id)

            logfire.info(
                "Post deleted",
                post_id=post_id,
                comments_removed=len(comments),
                reactions_removed=len(reactions),
            )
