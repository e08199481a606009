"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from discuss.domain.model import Comment, Thread, Vote
from discuss.domain.value import (
    CommentId,
    CommentState,
    ThreadId,
    VoteId,
    VoterId,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_thread(thread_id: str = "t1", **overrides) -> Thread:
    """Build a thread with sensible defaults."""
    data = {
        "id": ThreadId(thread_id),
        "permalink": f"https://example.com/{thread_id}",
        "is_commentable": True,
        "num_comments": 0,
        "last_comment_at": None,
        "created_at": BASE_TIME,
    }
    data.update(overrides)
    return Thread(**data)


def make_comment(
    thread: Thread,
    parent: Comment | None = None,
    minutes: int = 0,
    **overrides,
) -> Comment:
    """Build a comment on a thread, optionally replying to a parent.

    Args:
        thread: Thread the comment belongs to
        parent: Comment being replied to
        minutes: Offset from BASE_TIME for created_at, to control ordering
        **overrides: Any other Comment field
    """
    ancestors = parent.child_ancestors() if parent else ()
    created_at = BASE_TIME + timedelta(minutes=minutes)
    data = {
        "id": CommentId(uuid4()),
        "thread_id": thread.id,
        "body": "A comment",
        "author_id": None,
        "author_name": None,
        "parent_id": parent.id if parent else None,
        "ancestors": ancestors,
        "depth": len(ancestors),
        "state": CommentState.VISIBLE,
        "previous_state": None,
        "score": 0,
        "created_at": created_at,
        "updated_at": created_at,
    }
    data.update(overrides)
    return Comment(**data)


def make_vote(comment: Comment, voter_id: str = "voter-1", value: int = 1) -> Vote:
    """Build a vote on a comment."""
    return Vote(
        id=VoteId(uuid4()),
        comment_id=comment.id,
        voter_id=VoterId(voter_id),
        value=value,
        created_at=BASE_TIME,
    )
