"""Strongly typed identifiers for Discuss domain entities.

Threads are keyed by a caller-supplied string (the external content they are
attached to). Comments and votes use store-assigned UUIDs. Voters are opaque
strings handed over by whatever authenticates the request.
"""

from typing import NewType
from uuid import UUID

ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
VoterId = NewType("VoterId", str)
