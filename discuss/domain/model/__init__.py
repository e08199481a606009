"""Domain model entities for Discuss."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import Thread
from discuss.domain.model.vote import Vote

__all__ = [
    "Thread",
    "Comment",
    "Vote",
]
