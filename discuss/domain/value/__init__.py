"""Domain value objects for Discuss."""

from discuss.domain.value.identifiers import CommentId, ThreadId, VoteId, VoterId
from discuss.domain.value.path import decode_path, encode_path
from discuss.domain.value.types import CommentSorter, CommentState, CommentView

__all__ = [
    # Identifiers
    "ThreadId",
    "CommentId",
    "VoteId",
    "VoterId",
    # Types
    "CommentState",
    "CommentSorter",
    "CommentView",
    # Path codec
    "encode_path",
    "decode_path",
]
