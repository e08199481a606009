"""Unit tests for the Comment model."""

from uuid import uuid4

import pytest

from discuss.domain.value import CommentId, CommentState
from tests.conftest import make_comment, make_thread


class TestCommentThreading:
    """Tests for the parent / ancestors / depth invariants."""

    def test_reply_extends_parent_ancestors(self):
        """A reply's ancestors are its parent's ancestors plus the parent."""
        # Arrange
        thread = make_thread()
        root = make_comment(thread)
        child = make_comment(thread, parent=root)

        # Act
        grandchild = make_comment(thread, parent=child)

        # Assert
        assert grandchild.ancestors == (root.id, child.id)
        assert grandchild.depth == 2
        assert grandchild.parent_id == child.id
        assert grandchild.path == f"{root.id}/{child.id}"

    def test_depth_must_match_ancestors(self):
        thread = make_thread()

        with pytest.raises(ValueError, match="Depth"):
            make_comment(thread, depth=1)

    def test_parent_must_be_last_ancestor(self):
        thread = make_thread()
        root = make_comment(thread)

        with pytest.raises(ValueError, match="Parent must be the last ancestor"):
            make_comment(thread, parent=root, parent_id=CommentId(uuid4()))

    def test_comment_cannot_be_its_own_ancestor(self):
        thread = make_thread()
        comment_id = CommentId(uuid4())

        with pytest.raises(ValueError, match="own ancestor"):
            make_comment(
                thread,
                id=comment_id,
                parent_id=comment_id,
                ancestors=(comment_id,),
                depth=1,
            )

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError):
            make_comment(make_thread(), body="")

    def test_is_deleted(self):
        thread = make_thread()

        assert not make_comment(thread).is_deleted
        assert make_comment(thread, state=CommentState.DELETED).is_deleted


class TestEvolve:
    def test_evolve_replaces_fields(self):
        comment = make_comment(make_thread(), body="before")

        edited = comment.evolve(body="after")

        assert edited.body == "after"
        assert edited.id == comment.id
        assert comment.body == "before"

    def test_evolve_revalidates(self):
        comment = make_comment(make_thread())

        with pytest.raises(ValueError, match="Depth"):
            comment.evolve(depth=3)
