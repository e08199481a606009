"""Unit tests for row/model mappers."""

from uuid import uuid4

from discuss.domain.value import CommentState
from discuss.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_vote,
    vote_to_dict,
)
from tests.conftest import make_comment, make_thread, make_vote


class TestCommentMapping:
    def test_ancestors_stored_as_path(self):
        thread = make_thread("t1")
        root = make_comment(thread)
        child = make_comment(thread, parent=root)
        grandchild = make_comment(thread, parent=child)

        data = comment_to_dict(grandchild)

        assert data["ancestors"] == f"{root.id}/{child.id}"
        assert data["depth"] == 2
        assert data["state"] == "visible"
        assert data["previous_state"] is None

    def test_root_has_empty_path(self):
        data = comment_to_dict(make_comment(make_thread("t1")))

        assert data["ancestors"] == ""
        assert data["parent_id"] is None

    def test_row_with_string_ids(self):
        """Rows may carry UUIDs as strings; they are parsed back."""
        thread = make_thread("t1")
        root = make_comment(thread)
        child = make_comment(
            thread,
            parent=root,
            state=CommentState.SPAM,
            previous_state=CommentState.VISIBLE,
        )
        row = comment_to_dict(child)
        row["id"] = str(child.id)
        row["parent_id"] = str(root.id)

        comment = row_to_comment(row)

        assert comment == child
        assert comment.ancestors == (root.id,)


class TestVoteMapping:
    def test_row_to_vote(self):
        vote = make_vote(make_comment(make_thread("t1")), voter_id="v", value=-1)
        row = vote_to_dict(vote)
        row["comment_id"] = str(vote.comment_id)

        assert row_to_vote(row) == vote

    def test_uuid_ids_kept(self):
        vote_id = uuid4()
        vote = make_vote(make_comment(make_thread("t1")))
        row = {**vote_to_dict(vote), "id": vote_id}

        assert row_to_vote(row).id == vote_id
