"""Comment domain service.

Owns the comment thread store semantics: threads are kept as a flat
collection with parent pointers, materialized into a forest on read and
removed subtree-at-a-time on delete.
"""

from datetime import datetime

import logfire

from blog.domain.error import (
    CorruptedDataError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from blog.domain.model import Comment, CommentNode, Identity
from blog.domain.repository import CommentRepository, IdentityProvider, PostRegistry
from blog.domain.value import COMMENT_CONTENT_MAX_LENGTH, CommentId, PostId, UserId

from .base import Service


def normalize_content(content: str) -> str:
    """Trim comment content and enforce its length bounds.

    Raises:
        ValidationError: If the trimmed content is empty or too long
    """
    trimmed = content.strip()
    if not 1 <= len(trimmed) <= COMMENT_CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Content must be between 1 and {COMMENT_CONTENT_MAX_LENGTH} characters"
        )
    return trimmed


def build_comment_forest(comments: list[Comment]) -> list[CommentNode]:
    """Assemble a flat list of comments into threads.

    Comments are ordered newest first (ties go to the higher ID) and that
    order is kept inside every sibling group. Replies whose parent is not
    among ``comments`` are dropped rather than promoted to the top level.

    Args:
        comments: Comments belonging to a single post

    Returns:
        Top-level nodes, each holding its replies recursively
    """
    ordered = sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    # First pass: one node per comment
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in ordered
    }

    # Second pass: attach each node to its parent or to the roots
    roots: list[CommentNode] = []
    for comment in ordered:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
        elif comment.parent_id in nodes:
            nodes[comment.parent_id].replies.append(node)

    return roots


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_registry: PostRegistry,
        identity_provider: IdentityProvider,
        collaborator_timeout: float = 2.0,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_registry: Registry answering whether a post exists
            identity_provider: Resolves authors to their display attributes
            collaborator_timeout: Seconds allowed for each collaborator lookup
        """
        self.comment_repository = comment_repository
        self.post_registry = post_registry
        self.identity_provider = identity_provider
        self.collaborator_timeout = collaborator_timeout

    async def _ensure_post_exists(self, post_id: PostId) -> None:
        exists = await self.call_collaborator(
            "post_registry", self.post_registry.exists(post_id)
        )
        if not exists:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))

    async def _resolve_author(self, author_id: UserId) -> Identity:
        return await self.call_collaborator(
            "identity_provider", self.identity_provider.resolve(author_id)
        )

    async def _get_owned_comment(
        self, comment_id: CommentId, acting_user_id: UserId
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != acting_user_id:
            logfire.warn(
                "Comment modification by non-author rejected",
                comment_id=comment_id,
                author_id=comment.author_id,
                acting_user_id=acting_user_id,
            )
            raise NotAuthorizedError("comment", str(comment_id), str(acting_user_id))
        return comment

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get the threaded comments of a post.

        Args:
            post_id: Post ID

        Returns:
            Top-level comments, newest first, each holding its replies

        Raises:
            NotFoundError: If the post does not exist
            UnavailableError: If the post registry could not be reached
        """
        with logfire.span("comment_service.get_comment_tree", post_id=post_id):
            async with self.comment_repository.transaction():
                await self._ensure_post_exists(post_id)
                comments = await self.comment_repository.find_by_post(post_id)
                roots = build_comment_forest(comments)

            logfire.info(
                "Comment tree built",
                post_id=post_id,
                count=len(comments),
                root_count=len(roots),
            )
            return roots

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            async with self.comment_repository.transaction():
                return await self.comment_repository.find_by_id(comment_id)

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text (trimmed before storing)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment, carrying a snapshot of its author

        Raises:
            NotFoundError: If the post, the parent comment (on this post)
                or the author does not exist
            ValidationError: If the content length is out of bounds
            UnavailableError: If a collaborator could not be reached
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            async with self.comment_repository.transaction():
                await self._ensure_post_exists(post_id)
                text = normalize_content(content)

                if parent_id is not None:
                    parent = await self.comment_repository.find_by_id(parent_id)
                    if parent is None or parent.post_id != post_id:
                        logfire.warn(
                            "Parent comment not found on post",
                            parent_id=parent_id,
                            post_id=post_id,
                        )
                        raise NotFoundError("Parent comment", str(parent_id))

                author = await self._resolve_author(author_id)

                now = datetime.now()
                comment = Comment(
                    id=await self.comment_repository.next_id(),
                    post_id=post_id,
                    author_id=author.id,
                    author=author.snapshot(),
                    content=text,
                    parent_id=parent_id,
                    created_at=now,
                    updated_at=now,
                )
                saved = await self.comment_repository.save(comment)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                author_id=author_id,
                is_reply=not saved.is_top_level,
            )
            return saved

    async def update_comment(
        self, comment_id: CommentId, acting_user_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            acting_user_id: User performing the edit (must be the author)
            content: New comment text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the acting user is not the author
            ValidationError: If the content length is out of bounds
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            acting_user_id=acting_user_id,
        ):
            async with self.comment_repository.transaction():
                comment = await self._get_owned_comment(comment_id, acting_user_id)
                text = normalize_content(content)

                updated = await self.comment_repository.save(
                    comment.model_copy(
                        update={"content": text, "updated_at": datetime.now()}
                    )
                )

            logfire.info(
                "Comment content updated",
                comment_id=comment_id,
                content_length=len(text),
            )
            return updated

    async def delete_comment(
        self, comment_id: CommentId, acting_user_id: UserId
    ) -> int:
        """Delete a comment together with every reply beneath it.

        Only the targeted comment's authorship is checked: replies written
        by other users go with it.

        Args:
            comment_id: Comment ID
            acting_user_id: User performing the delete (must be the author)

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the acting user is not the author
            CorruptedDataError: If the reply chain loops; nothing is removed
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            acting_user_id=acting_user_id,
        ):
            async with self.comment_repository.transaction():
                await self._get_owned_comment(comment_id, acting_user_id)
                doomed = await self._collect_subtree(comment_id)

                for doomed_id in doomed:
                    await self.comment_repository.delete(doomed_id)

            logfire.info(
                "Comment thread deleted",
                comment_id=comment_id,
                removed=len(doomed),
            )
            return len(doomed)

    async def _collect_subtree(self, root_id: CommentId) -> list[CommentId]:
        """List a comment and its descendants, deepest replies first.

        Walks the thread depth-first with an explicit stack so that long
        reply chains cannot exhaust the interpreter's recursion limit.

        Raises:
            CorruptedDataError: If a comment is reached twice
        """
        seen: set[CommentId] = {root_id}
        preorder: list[CommentId] = []
        stack: list[CommentId] = [root_id]

        while stack:
            current = stack.pop()
            preorder.append(current)
            for child in await self.comment_repository.find_children(current):
                if child.id in seen:
                    logfire.error(
                        "Cycle detected in comment thread",
                        root_id=root_id,
                        comment_id=child.id,
                        parent_id=current,
                    )
                    raise CorruptedDataError("comment thread", str(child.id))
                seen.add(child.id)
                stack.append(child.id)

        # Reversed preorder visits every reply before its parent
        return list(reversed(preorder))
