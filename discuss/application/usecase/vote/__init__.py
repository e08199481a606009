"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_comment_score import (
    GetCommentScoreRequest,
    GetCommentScoreResponse,
    GetCommentScoreUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetCommentScoreRequest",
    "GetCommentScoreResponse",
    "GetCommentScoreUseCase",
]
