"""Comment use cases."""

from .change_comment_state import (
    ChangeCommentStateRequest,
    ChangeCommentStateResponse,
    ChangeCommentStateUseCase,
)
from .common import CommentItem, CommentNodeItem
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_thread_comments import (
    GetThreadCommentsRequest,
    GetThreadCommentsResponse,
    GetThreadCommentsUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "ChangeCommentStateRequest",
    "ChangeCommentStateResponse",
    "ChangeCommentStateUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetThreadCommentsRequest",
    "GetThreadCommentsResponse",
    "GetThreadCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
