"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.thread import PostgresThreadRepository
from discuss.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
