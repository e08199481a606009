"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, Thread, Vote
from discuss.domain.value import (
    CommentId,
    CommentState,
    ThreadId,
    VoteId,
    VoterId,
    decode_path,
    encode_path,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs as returned by asyncpg or as strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        permalink=row.get("permalink"),
        is_commentable=row["is_commentable"],
        num_comments=row["num_comments"],
        last_comment_at=row.get("last_comment_at"),
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return thread.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The stored ancestor path is decoded back into a tuple of ids.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    previous_state = row.get("previous_state")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(row["thread_id"]),
        body=row["body"],
        author_id=row.get("author_id"),
        author_name=row.get("author_name"),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        ancestors=decode_path(row.get("ancestors")),
        depth=row["depth"],
        state=CommentState(row["state"]),
        previous_state=CommentState(previous_state) if previous_state else None,
        score=row["score"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["ancestors"] = encode_path(comment.ancestors)
    data["state"] = comment.state.value
    data["previous_state"] = (
        comment.previous_state.value if comment.previous_state else None
    )
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        voter_id=VoterId(row["voter_id"]),
        value=row["value"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return vote.model_dump()
