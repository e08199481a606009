"""Domain services."""

from .comment_service import CommentService
from .comment_tree import CommentNode, CommentTreeBuilder
from .thread_service import ThreadService
from .vote_service import VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "CommentTreeBuilder",
    "ThreadService",
    "VoteService",
]
