"""Unit tests for ThreadService."""

import pytest

from discuss.domain.error import DuplicateThreadError, NotFoundError, ValidationError
from discuss.domain.repository import ThreadRepository
from discuss.domain.service import ThreadService
from discuss.domain.value import ThreadId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread and add_thread."""

    @pytest.mark.asyncio
    async def test_permalink_is_url_decoded(self, unit_env):
        """Permalinks arrive URL-encoded and are stored decoded."""
        thread_service = await unit_env.get(ThreadService)

        thread = thread_service.create_thread(
            ThreadId("t1"), "https%3A%2F%2Fexample.com%2Fa%3Fb%3D1"
        )

        assert thread.permalink == "https://example.com/a?b=1"
        assert thread.is_commentable is True
        assert thread.num_comments == 0

    @pytest.mark.asyncio
    async def test_empty_id_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(ValidationError):
            thread_service.create_thread(ThreadId(""))

    @pytest.mark.asyncio
    async def test_duplicate_thread_id_keeps_first(self, unit_env):
        """Saving a second thread "T1" fails and the first one stays stored."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)
        await thread_service.add_thread(
            thread_service.create_thread(ThreadId("T1"), "https://first.example")
        )

        # Act & Assert
        with pytest.raises(DuplicateThreadError, match="T1"):
            await thread_service.add_thread(
                thread_service.create_thread(ThreadId("T1"), "https://second.example")
            )

        stored = await thread_repo.find_by_id(ThreadId("T1"))
        assert stored is not None
        assert stored.permalink == "https://first.example"


class TestGetThreads:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_get_missing_thread_raises(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError, match="Thread not found: nope"):
            await thread_service.get_thread(ThreadId("nope"))

    @pytest.mark.asyncio
    async def test_find_threads_in_requested_order(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        for thread_id in ("a", "b", "c"):
            await thread_service.add_thread(
                thread_service.create_thread(ThreadId(thread_id))
            )

        threads = await thread_service.find_threads(
            [ThreadId("c"), ThreadId("missing"), ThreadId("a")]
        )

        assert [t.id for t in threads] == ["c", "a"]

    @pytest.mark.asyncio
    async def test_find_threads_requires_ids(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(ValidationError):
            await thread_service.find_threads([])

    @pytest.mark.asyncio
    async def test_get_or_create_creates_once(self, unit_env):
        """The first lookup creates the thread, later ones return it."""
        thread_service = await unit_env.get(ThreadService)

        created = await thread_service.get_or_create_thread(
            ThreadId("page-1"), "https%3A%2F%2Fexample.com%2Fpage-1"
        )
        again = await thread_service.get_or_create_thread(
            ThreadId("page-1"), "https://ignored.example"
        )

        assert created.permalink == "https://example.com/page-1"
        assert again == created


class TestEditCommentable:
    """Tests for edit_commentable and save_thread."""

    @pytest.mark.asyncio
    async def test_close_thread(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.add_thread(
            thread_service.create_thread(ThreadId("t1"))
        )

        closed = await thread_service.edit_commentable(thread, False)

        assert closed.is_commentable is False
        stored = await thread_service.get_thread(ThreadId("t1"))
        assert stored.is_commentable is False

    @pytest.mark.asyncio
    async def test_save_unknown_thread_raises(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await thread_service.save_thread(
                thread_service.create_thread(ThreadId("never-added"))
            )
