"""Unit tests for CommentService."""

import asyncio
from datetime import datetime, timedelta

import pytest

from blog.domain.error import (
    CorruptedDataError,
    NotAuthorizedError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from blog.domain.model import Identity
from blog.domain.repository import CommentRepository, IdentityProvider, PostRegistry
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId, Username
from blog.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryIdentityProvider,
    InMemoryPostRegistry,
)
from tests.conftest import make_comment, make_identity, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, fresh stores per test
unit_env = create_env_fixture()

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


async def _setup(unit_env, post_ids=(1,), user_ids=(1, 2)):
    """Register posts and users, return the service and the stores."""
    comment_service = await unit_env.get(CommentService)
    comment_repo = await unit_env.get(CommentRepository)
    post_registry = await unit_env.get(PostRegistry)
    identity_provider = await unit_env.get(IdentityProvider)

    for post_id in post_ids:
        await post_registry.save(make_post(post_id))
    users = {}
    for user_id in user_ids:
        users[user_id] = await identity_provider.save(make_identity(user_id))

    return comment_service, comment_repo, users


def _ids(nodes):
    return [node.comment.id for node in nodes]


class TestGetCommentTree:
    """Tests for get_comment_tree method."""

    @pytest.mark.asyncio
    async def test_nested_chain_builds_single_branch(self, unit_env):
        """A reply chain 1 <- 2 <- 3 yields one root with one nested path."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(
            make_comment(2, 1, users[1], parent_id=1, created_at=BASE_TIME + timedelta(minutes=1))
        )
        await repo.save(
            make_comment(3, 1, users[1], parent_id=2, created_at=BASE_TIME + timedelta(minutes=2))
        )

        # Act
        roots = await service.get_comment_tree(PostId(1))

        # Assert
        assert _ids(roots) == [1]
        assert _ids(roots[0].replies) == [2]
        assert _ids(roots[0].replies[0].replies) == [3]
        assert roots[0].replies[0].replies[0].replies == []

    @pytest.mark.asyncio
    async def test_only_comments_of_requested_post(self, unit_env):
        """Comments from other posts never appear in the tree."""
        # Arrange
        service, repo, users = await _setup(unit_env, post_ids=(1, 2))
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 2, users[1], created_at=BASE_TIME))
        await repo.save(
            make_comment(3, 2, users[2], parent_id=2, created_at=BASE_TIME)
        )

        # Act
        roots = await service.get_comment_tree(PostId(1))

        # Assert
        assert _ids(roots) == [1]
        assert roots[0].replies == []

    @pytest.mark.asyncio
    async def test_newest_first_at_every_level(self, unit_env):
        """Roots and siblings are ordered by created_at descending."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(
            make_comment(2, 1, users[2], created_at=BASE_TIME + timedelta(hours=1))
        )
        await repo.save(
            make_comment(3, 1, users[2], parent_id=1, created_at=BASE_TIME + timedelta(hours=2))
        )
        await repo.save(
            make_comment(4, 1, users[1], parent_id=1, created_at=BASE_TIME + timedelta(hours=3))
        )
        await repo.save(
            make_comment(5, 1, users[1], parent_id=1, created_at=BASE_TIME + timedelta(minutes=30))
        )

        # Act
        roots = await service.get_comment_tree(PostId(1))

        # Assert
        assert _ids(roots) == [2, 1]
        assert _ids(roots[1].replies) == [4, 3, 5]

    @pytest.mark.asyncio
    async def test_linkage_matches_parent_ids(self, unit_env):
        """Every node's parent_id is its parent's id; roots have none."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[2], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, users[1], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(4, 1, users[2], parent_id=3, created_at=BASE_TIME))
        await repo.save(make_comment(5, 1, users[2], created_at=BASE_TIME))

        # Act
        roots = await service.get_comment_tree(PostId(1))

        # Assert
        def check(node):
            for reply in node.replies:
                assert reply.comment.parent_id == node.comment.id
                check(reply)

        assert all(root.comment.parent_id is None for root in roots)
        for root in roots:
            check(root)
        assert sum(root.count() for root in roots) == 5

    @pytest.mark.asyncio
    async def test_listing_twice_gives_same_tree(self, unit_env):
        """Listing without intervening mutations is idempotent."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[2], parent_id=1, created_at=BASE_TIME))

        # Act
        first = await service.get_comment_tree(PostId(1))
        second = await service.get_comment_tree(PostId(1))

        # Assert
        assert first == second
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_post_without_comments_gives_empty_forest(self, unit_env):
        """An existing post with no comments yields an empty list."""
        service, _, _ = await _setup(unit_env)

        assert await service.get_comment_tree(PostId(1)) == []

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Listing comments of a missing post raises NotFoundError."""
        service, _, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await service.get_comment_tree(PostId(99))


    @pytest.mark.asyncio
    async def test_deep_reply_chain_is_listed(self, unit_env):
        """A chain far deeper than the recursion limit is listed intact."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        for comment_id in range(2, 1502):
            await repo.save(
                make_comment(
                    comment_id, 1, users[2], parent_id=comment_id - 1, created_at=BASE_TIME
                )
            )

        # Act
        roots = await service.get_comment_tree(PostId(1))

        # Assert
        assert _ids(roots) == [1]
        assert roots[0].count() == 1501
        walked = list(roots[0].walk())
        assert [node.comment.id for node, _ in walked] == list(range(1, 1502))
        assert [depth for _, depth in walked] == list(range(1501))


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment has no parent and a snapshot of its author."""
        # Arrange
        service, repo, users = await _setup(unit_env)

        # Act
        result = await service.create_comment(
            post_id=PostId(1),
            author_id=UserId(1),
            content="  First!  ",
        )

        # Assert
        assert result.parent_id is None
        assert result.post_id == 1
        assert result.content == "First!"
        assert result.author.id == 1
        assert result.author.username == users[1].username
        assert result.author.avatar_url == users[1].avatar_url
        assert result.created_at == result.updated_at

        saved = await repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Reply references its parent comment."""
        # Arrange
        service, _, _ = await _setup(unit_env)
        parent = await service.create_comment(PostId(1), UserId(1), "Parent")

        # Act
        reply = await service.create_comment(
            PostId(1), UserId(2), "Reply", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        roots = await service.get_comment_tree(PostId(1))
        assert _ids(roots) == [parent.id]
        assert _ids(roots[0].replies) == [reply.id]

    @pytest.mark.asyncio
    async def test_ids_are_never_reused(self, unit_env):
        """IDs keep increasing even after comments are deleted."""
        # Arrange
        service, _, _ = await _setup(unit_env)
        first = await service.create_comment(PostId(1), UserId(1), "One")
        second = await service.create_comment(PostId(1), UserId(1), "Two")
        await service.delete_comment(second.id, UserId(1))

        # Act
        third = await service.create_comment(PostId(1), UserId(1), "Three")

        # Assert
        assert first.id < second.id < third.id

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a non-existent comment fails and stores nothing."""
        # Arrange
        service, repo, _ = await _setup(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await service.create_comment(
                PostId(1), UserId(1), "Orphan", parent_id=CommentId(99)
            )
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_parent_from_different_post_raises_not_found(self, unit_env):
        """A parent on another post is treated as missing."""
        # Arrange
        service, repo, _ = await _setup(unit_env, post_ids=(1, 2))
        other = await service.create_comment(PostId(2), UserId(1), "Elsewhere")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await service.create_comment(
                PostId(1), UserId(1), "Cross-post reply", parent_id=other.id
            )
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_unknown_post_raises_not_found(self, unit_env):
        """Commenting on a missing post fails."""
        service, repo, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await service.create_comment(PostId(42), UserId(1), "Hello")
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_author_raises_not_found(self, unit_env):
        """The author must resolve to a known identity."""
        service, repo, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="User not found"):
            await service.create_comment(PostId(1), UserId(7), "Hello")
        assert await repo.count() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   \n\t ", "x" * 1001])
    async def test_invalid_content_raises_validation_error(self, unit_env, content):
        """Trimmed content must be 1-1000 characters."""
        service, repo, _ = await _setup(unit_env)

        with pytest.raises(ValidationError):
            await service.create_comment(PostId(1), UserId(1), content)
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_content_at_max_length_after_trim_is_accepted(self, unit_env):
        """Surrounding whitespace does not count towards the limit."""
        service, _, _ = await _setup(unit_env)

        result = await service.create_comment(
            PostId(1), UserId(1), "  " + "x" * 1000 + "  "
        )

        assert len(result.content) == 1000

    @pytest.mark.asyncio
    async def test_author_snapshot_is_not_refreshed(self, unit_env):
        """Renaming the author later leaves existing comments untouched."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        identity_provider = await unit_env.get(IdentityProvider)
        comment = await service.create_comment(PostId(1), UserId(1), "Signed")

        # Act
        await identity_provider.save(
            Identity(id=UserId(1), username=Username("renamed"), avatar_url=None)
        )

        # Assert
        saved = await repo.find_by_id(comment.id)
        assert saved.author.username == users[1].username
        assert saved.author.avatar_url == users[1].avatar_url


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_update_content(self, unit_env):
        """Updating replaces content and bumps updated_at only."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[1], parent_id=1, created_at=BASE_TIME))

        # Act
        result = await service.update_comment(CommentId(2), UserId(1), " Edited ")

        # Assert
        assert result.content == "Edited"
        assert result.updated_at > BASE_TIME
        assert result.created_at == BASE_TIME
        assert result.parent_id == 1
        assert result.post_id == 1
        assert result.author_id == 1

        saved = await repo.find_by_id(CommentId(2))
        assert saved.content == "Edited"

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        """Only the author may edit; the comment stays unchanged."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        original = await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.update_comment(CommentId(1), UserId(2), "Hijacked")
        assert await repo.find_by_id(CommentId(1)) == original

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        service, _, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await service.update_comment(CommentId(5), UserId(1), "Anything")

    @pytest.mark.asyncio
    async def test_blank_content_raises_validation_error(self, unit_env):
        """Invalid content is rejected before anything is written."""
        service, repo, users = await _setup(unit_env)
        original = await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))

        with pytest.raises(ValidationError):
            await service.update_comment(CommentId(1), UserId(1), "   ")
        assert await repo.find_by_id(CommentId(1)) == original


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_deleting_root_removes_whole_chain(self, unit_env):
        """Deleting 1 in the chain 1 <- 2 <- 3 removes all three."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[1], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, users[1], parent_id=2, created_at=BASE_TIME))

        # Act
        removed = await service.delete_comment(CommentId(1), UserId(1))

        # Assert
        assert removed == 3
        assert await repo.count() == 0
        assert await service.get_comment_tree(PostId(1)) == []

    @pytest.mark.asyncio
    async def test_cascade_removes_replies_by_other_users(self, unit_env):
        """Replies written by other users are removed with their ancestor.

        Authorship is only checked on the comment being deleted.
        """
        # Arrange
        service, repo, users = await _setup(unit_env, user_ids=(1, 2, 3))
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[2], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, users[3], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(4, 1, users[2], parent_id=3, created_at=BASE_TIME))

        # Act
        removed = await service.delete_comment(CommentId(1), UserId(1))

        # Assert
        assert removed == 4
        for comment_id in (1, 2, 3, 4):
            assert await repo.find_by_id(CommentId(comment_id)) is None

    @pytest.mark.asyncio
    async def test_deleting_reply_keeps_siblings_and_ancestors(self, unit_env):
        """Only the targeted subtree goes."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[2], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, users[2], parent_id=2, created_at=BASE_TIME))
        await repo.save(make_comment(4, 1, users[1], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(5, 1, users[1], created_at=BASE_TIME))

        # Act
        removed = await service.delete_comment(CommentId(2), UserId(2))

        # Assert
        assert removed == 2
        remaining = sorted(
            c.id for c in await repo.find_by_post(PostId(1))
        )
        assert remaining == [1, 4, 5]

    @pytest.mark.asyncio
    async def test_long_reply_chain_is_deleted(self, unit_env):
        """Chains deeper than the recursion limit are handled."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        for comment_id in range(2, 2002):
            await repo.save(
                make_comment(
                    comment_id, 1, users[2], parent_id=comment_id - 1, created_at=BASE_TIME
                )
            )

        # Act
        removed = await service.delete_comment(CommentId(1), UserId(1))

        # Assert
        assert removed == 2001
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_non_author_is_rejected(self, unit_env):
        """A non-author cannot delete; nothing is removed."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[2], parent_id=1, created_at=BASE_TIME))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(CommentId(1), UserId(2))
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        service, _, _ = await _setup(unit_env)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await service.delete_comment(CommentId(1), UserId(1))

    @pytest.mark.asyncio
    async def test_self_referencing_comment_raises_corrupted(self, unit_env):
        """A comment listed as its own parent aborts the delete."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], parent_id=1, created_at=BASE_TIME))

        # Act & Assert
        with pytest.raises(CorruptedDataError):
            await service.delete_comment(CommentId(1), UserId(1))
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_reply_cycle_raises_corrupted_and_removes_nothing(self, unit_env):
        """Two comments parenting each other are detected, not looped over."""
        # Arrange
        service, repo, users = await _setup(unit_env)
        await repo.save(make_comment(1, 1, users[1], parent_id=2, created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, users[1], parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, users[1], parent_id=2, created_at=BASE_TIME))

        # Act & Assert
        with pytest.raises(CorruptedDataError):
            await service.delete_comment(CommentId(1), UserId(1))
        assert await repo.count() == 3


class _DelayedIdentityProvider(InMemoryIdentityProvider):
    """Identity provider that yields to the event loop before answering."""

    async def resolve(self, user_id):
        await asyncio.sleep(0.01)
        return await super().resolve(user_id)


class TestConcurrentOperations:
    """Overlapping deletes and replies never leave orphaned comments."""

    @staticmethod
    async def _thread(identities: InMemoryIdentityProvider):
        """Post 1 with the chain 1 <- 2 <- 3, all by user 1."""
        posts = InMemoryPostRegistry()
        await posts.save(make_post(1))
        user = await identities.save(make_identity(1))
        repo = InMemoryCommentRepository()
        await repo.save(make_comment(1, 1, user, created_at=BASE_TIME))
        await repo.save(make_comment(2, 1, user, parent_id=1, created_at=BASE_TIME))
        await repo.save(make_comment(3, 1, user, parent_id=2, created_at=BASE_TIME))
        service = CommentService(
            comment_repository=repo,
            post_registry=posts,
            identity_provider=identities,
        )
        return service, repo

    @staticmethod
    async def _assert_no_orphans(repo: InMemoryCommentRepository):
        for comment in await repo.find_by_post(PostId(1)):
            if comment.parent_id is not None:
                assert await repo.find_by_id(comment.parent_id) is not None

    @pytest.mark.asyncio
    async def test_reply_racing_root_delete(self):
        """The reply either misses its parent or is swept by the cascade."""
        # Arrange
        service, repo = await self._thread(InMemoryIdentityProvider())

        # Act
        removed, reply = await asyncio.gather(
            service.delete_comment(CommentId(1), UserId(1)),
            service.create_comment(
                PostId(1), UserId(1), "Late reply", parent_id=CommentId(3)
            ),
            return_exceptions=True,
        )

        # Assert
        assert await repo.count() == 0
        if isinstance(reply, Exception):
            assert isinstance(reply, NotFoundError)
            assert removed == 3
        else:
            assert removed == 4
        await self._assert_no_orphans(repo)

    @pytest.mark.asyncio
    async def test_reply_in_flight_is_swept_by_later_delete(self):
        """A reply holding the store when the delete starts is removed with it."""
        # Arrange
        service, repo = await self._thread(_DelayedIdentityProvider())

        # Act
        reply, removed = await asyncio.gather(
            service.create_comment(
                PostId(1), UserId(1), "Early reply", parent_id=CommentId(3)
            ),
            service.delete_comment(CommentId(1), UserId(1)),
        )

        # Assert
        assert reply.parent_id == 3
        assert removed == 4
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_concurrent_replies_get_distinct_ids(self):
        """Parallel creates never share an ID."""
        service, repo = await self._thread(_DelayedIdentityProvider())

        created = await asyncio.gather(
            *(
                service.create_comment(
                    PostId(1), UserId(1), f"Reply {n}", parent_id=CommentId(1)
                )
                for n in range(10)
            )
        )

        assert len({comment.id for comment in created}) == 10
        assert await repo.count() == 13
        await self._assert_no_orphans(repo)


class _FailingPostRegistry(PostRegistry):
    """Post registry whose backend is down."""

    async def exists(self, post_id):
        raise ConnectionError("registry offline")

    async def next_id(self):
        raise ConnectionError("registry offline")

    async def find_by_id(self, post_id):
        raise ConnectionError("registry offline")

    async def find_all(self):
        raise ConnectionError("registry offline")

    async def save(self, post):
        raise ConnectionError("registry offline")

    async def delete(self, post_id):
        raise ConnectionError("registry offline")


class _SlowPostRegistry(InMemoryPostRegistry):
    """Post registry that never answers in time."""

    async def exists(self, post_id):
        await asyncio.sleep(1)
        return True


class _FailingIdentityProvider(IdentityProvider):
    """Identity provider whose backend is down."""

    async def resolve(self, user_id):
        raise ConnectionError("identity backend offline")

    async def next_id(self):
        raise ConnectionError("identity backend offline")

    async def find_by_username(self, username):
        raise ConnectionError("identity backend offline")

    async def find_by_email(self, email):
        raise ConnectionError("identity backend offline")

    async def save(self, identity):
        raise ConnectionError("identity backend offline")


class _SlowIdentityProvider(InMemoryIdentityProvider):
    """Identity provider that never answers in time."""

    async def resolve(self, user_id):
        await asyncio.sleep(1)
        return await super().resolve(user_id)


class TestCollaboratorFailures:
    """A collaborator that cannot answer makes the operation unavailable."""

    @staticmethod
    async def _service(
        post_registry: PostRegistry | None = None,
        identity_provider: IdentityProvider | None = None,
    ) -> tuple[CommentService, InMemoryCommentRepository]:
        if post_registry is None:
            post_registry = InMemoryPostRegistry()
            await post_registry.save(make_post(1))
        if identity_provider is None:
            identity_provider = InMemoryIdentityProvider()
            await identity_provider.save(make_identity(1))
        repo = InMemoryCommentRepository()
        service = CommentService(
            comment_repository=repo,
            post_registry=post_registry,
            identity_provider=identity_provider,
            collaborator_timeout=0.05,
        )
        return service, repo

    @pytest.mark.asyncio
    async def test_registry_error_raises_unavailable(self):
        service, repo = await self._service(post_registry=_FailingPostRegistry())

        with pytest.raises(UnavailableError, match="post_registry"):
            await service.create_comment(PostId(1), UserId(1), "Hello")
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_registry_timeout_raises_unavailable(self):
        service, _ = await self._service(post_registry=_SlowPostRegistry())

        with pytest.raises(UnavailableError, match="timed out"):
            await service.get_comment_tree(PostId(1))

    @pytest.mark.asyncio
    async def test_identity_provider_error_raises_unavailable(self):
        """An unreachable identity provider fails the create, storing nothing."""
        service, repo = await self._service(
            identity_provider=_FailingIdentityProvider()
        )

        with pytest.raises(UnavailableError, match="identity_provider") as exc_info:
            await service.create_comment(PostId(1), UserId(1), "Hello")
        assert exc_info.value.collaborator == "identity_provider"
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_identity_provider_timeout_raises_unavailable(self):
        identities = _SlowIdentityProvider()
        await identities.save(make_identity(1))
        service, repo = await self._service(identity_provider=identities)

        with pytest.raises(UnavailableError, match="identity_provider unavailable: timed out"):
            await service.create_comment(PostId(1), UserId(1), "Hello")
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_reported_as_unavailable(self):
        """Domain errors from a reachable collaborator pass through."""
        service, _ = await self._service()

        with pytest.raises(NotFoundError, match="User not found"):
            await service.create_comment(PostId(1), UserId(9), "Hello")
