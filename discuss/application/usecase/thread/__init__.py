"""Thread use cases."""

from .common import ThreadItem
from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .get_threads import GetThreadsRequest, GetThreadsResponse, GetThreadsUseCase
from .set_commentable import (
    SetCommentableRequest,
    SetCommentableResponse,
    SetCommentableUseCase,
)

__all__ = [
    "ThreadItem",
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "GetThreadsRequest",
    "GetThreadsResponse",
    "GetThreadsUseCase",
    "SetCommentableRequest",
    "SetCommentableResponse",
    "SetCommentableUseCase",
]
