"""Unit tests for comment ordering in the in-memory comment repository."""

import pytest
from sqlalchemy.exc import IntegrityError

from discuss.domain.value import CommentSorter, ThreadId
from discuss.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment, make_thread


class TestCommentSorting:
    """Unit tests for the store-side sort orders."""

    @pytest.mark.asyncio
    async def test_date_orders(self):
        # Arrange
        repo = InMemoryCommentRepository()
        thread = make_thread("t1")
        older = make_comment(thread, minutes=0)
        newer = make_comment(thread, minutes=5)
        await repo.add(newer)
        await repo.add(older)

        # Act
        ascending = await repo.find_by_thread(ThreadId("t1"), sorter=CommentSorter.DATE_ASC)
        descending = await repo.find_by_thread(
            ThreadId("t1"), sorter=CommentSorter.DATE_DESC
        )

        # Assert
        assert [c.id for c in ascending] == [older.id, newer.id]
        assert [c.id for c in descending] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_score_order_breaks_ties_by_age(self):
        """Equal scores should list the older comment first."""
        repo = InMemoryCommentRepository()
        thread = make_thread("t1")
        top = make_comment(thread, minutes=9, score=10)
        tied_old = make_comment(thread, minutes=1, score=2)
        tied_new = make_comment(thread, minutes=2, score=2)
        for comment in (tied_new, top, tied_old):
            await repo.add(comment)

        comments = await repo.find_by_thread(
            ThreadId("t1"), sorter=CommentSorter.SCORE_DESC
        )

        assert [c.id for c in comments] == [top.id, tied_old.id, tied_new.id]

    @pytest.mark.asyncio
    async def test_max_depth_filter(self):
        repo = InMemoryCommentRepository()
        thread = make_thread("t1")
        root = make_comment(thread)
        child = make_comment(thread, parent=root, minutes=1)
        grandchild = make_comment(thread, parent=child, minutes=2)
        for comment in (root, child, grandchild):
            await repo.add(comment)

        comments = await repo.find_by_thread(
            ThreadId("t1"), max_depth=1, sorter=CommentSorter.DATE_ASC
        )

        assert [c.id for c in comments] == [root.id, child.id]

    @pytest.mark.asyncio
    async def test_other_threads_excluded(self):
        repo = InMemoryCommentRepository()
        mine = make_comment(make_thread("t1"))
        theirs = make_comment(make_thread("t2"))
        await repo.add(mine)
        await repo.add(theirs)

        comments = await repo.find_by_thread(ThreadId("t1"))

        assert [c.id for c in comments] == [mine.id]

    @pytest.mark.asyncio
    async def test_add_rejects_unknown_parent(self):
        repo = InMemoryCommentRepository()
        thread = make_thread("t1")
        orphan = make_comment(thread, parent=make_comment(thread))

        with pytest.raises(IntegrityError):
            await repo.add(orphan)
