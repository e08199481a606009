"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from discuss.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadsRequest,
    GetThreadsResponse,
    GetThreadsUseCase,
    GetThreadUseCase,
    SetCommentableRequest,
    SetCommentableResponse,
    SetCommentableUseCase,
)
from discuss.domain.error import DomainError
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    id: str = Field(min_length=1, max_length=255)
    permalink: str | None = None
    is_commentable: bool = True


class SetCommentableAPIRequest(BaseModel):
    """API request for opening or closing a thread."""

    is_commentable: bool


@router.post(
    "",
    response_model=CreateThreadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_thread(
    request: CreateThreadAPIRequest,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> CreateThreadResponse:
    """Create a thread for a piece of external content.

    Args:
        request: Thread id, permalink and commentable flag
        create_thread_use_case: Create thread use case from DI

    Returns:
        The created thread

    Raises:
        HTTPException: 409 if the thread id is taken
    """
    try:
        return await create_thread_use_case.execute(
            CreateThreadRequest(
                thread_id=request.id,
                permalink=request.permalink,
                is_commentable=request.is_commentable,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=GetThreadsResponse)
async def get_threads(
    get_threads_use_case: FromDishka[GetThreadsUseCase],
    ids: list[str] = Query(default=[]),
) -> GetThreadsResponse:
    """Get several threads at once (`?ids=a&ids=b`).

    Unknown ids are left out of the response.
    """
    try:
        return await get_threads_use_case.execute(GetThreadsRequest(thread_ids=ids))
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get a single thread."""
    try:
        return await get_thread_use_case.execute(GetThreadRequest(thread_id=thread_id))
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{thread_id}/commentable", response_model=SetCommentableResponse)
async def set_commentable(
    thread_id: str,
    request: SetCommentableAPIRequest,
    set_commentable_use_case: FromDishka[SetCommentableUseCase],
) -> SetCommentableResponse:
    """Open or close a thread for new comments.

    Args:
        thread_id: Thread ID
        request: New commentable flag
        set_commentable_use_case: Set commentable use case from DI

    Returns:
        The updated thread
    """
    try:
        return await set_commentable_use_case.execute(
            SetCommentableRequest(
                thread_id=thread_id, is_commentable=request.is_commentable
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
