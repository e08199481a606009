"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.error import (
    AccessDeniedError,
    NotFoundError,
    ThreadNotCommentableError,
    ValidationError,
)
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import ThreadId
from tests.conftest import make_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_increments_thread_count(self, unit_env):
        """Creating a comment should bump the thread's comment count."""
        # Arrange
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("t1"))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                thread_id="t1", body="Nice post", author_id="u1", author_name="Ann"
            )
        )

        # Assert
        assert response.saved is True
        assert response.comment.body == "Nice post"
        assert response.comment.depth == 0
        assert response.comment.author_name == "Ann"
        thread = await thread_repo.find_by_id(ThreadId("t1"))
        assert thread.num_comments == 1

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("t1"))
        root = await use_case.execute(CreateCommentRequest(thread_id="t1", body="Root"))

        reply = await use_case.execute(
            CreateCommentRequest(
                thread_id="t1", body="Reply", parent_id=root.comment.comment_id
            )
        )

        assert reply.comment.parent_id == root.comment.comment_id
        assert reply.comment.ancestors == [root.comment.comment_id]
        assert reply.comment.depth == 1

    @pytest.mark.asyncio
    async def test_closed_thread_rejects_comments(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("closed", is_commentable=False))

        with pytest.raises(ThreadNotCommentableError) as exc_info:
            await use_case.execute(CreateCommentRequest(thread_id="closed", body="Hi"))

        assert isinstance(exc_info.value, AccessDeniedError)
        thread = await thread_repo.find_by_id(ThreadId("closed"))
        assert thread.num_comments == 0

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(CreateCommentRequest(thread_id="nope", body="Hi"))

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("t1"))

        with pytest.raises(NotFoundError, match="Parent comment"):
            await use_case.execute(
                CreateCommentRequest(thread_id="t1", body="Hi", parent_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_parent_in_other_thread(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("A"))
        await thread_repo.add(make_thread("B"))
        in_b = await use_case.execute(CreateCommentRequest(thread_id="B", body="In B"))

        with pytest.raises(ValidationError, match="parent not in thread"):
            await use_case.execute(
                CreateCommentRequest(
                    thread_id="A", body="Reply", parent_id=in_b.comment.comment_id
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await thread_repo.add(make_thread("t1"))

        with pytest.raises(ValidationError, match="Invalid comment id"):
            await use_case.execute(
                CreateCommentRequest(thread_id="t1", body="Hi", parent_id="42")
            )
