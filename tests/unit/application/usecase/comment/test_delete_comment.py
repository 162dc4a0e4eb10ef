"""Unit tests for DeleteCommentUseCase."""

import pytest

from blog.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from blog.domain.error import NotAuthorizedError
from blog.domain.repository import CommentRepository
from tests.conftest import make_comment, make_identity
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_reports_removed_count(self, unit_env):
        """Deleting a comment reports how many comments went with it."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        alice, bob = make_identity(1), make_identity(2)

        await comment_repo.save(make_comment(1, 1, alice))
        await comment_repo.save(make_comment(2, 1, bob, parent_id=1))
        await comment_repo.save(make_comment(3, 1, alice, parent_id=2))
        await comment_repo.save(make_comment(4, 1, bob))

        # Act
        response = await use_case.execute(DeleteCommentRequest(comment_id=1, user_id=1))

        # Assert
        assert response.deleted == 3
        assert response.message == "Comment deleted successfully"
        assert await comment_repo.count() == 1

    @pytest.mark.asyncio
    async def test_delete_by_non_author_raises_error(self, unit_env):
        """Only the comment's author may delete it."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, 1, make_identity(1)))

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeleteCommentRequest(comment_id=1, user_id=2))
        assert await comment_repo.count() == 1
