"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    ChangeCommentStateRequest,
    ChangeCommentStateResponse,
    ChangeCommentStateUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetThreadCommentsRequest,
    GetThreadCommentsResponse,
    GetThreadCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.value import CommentSorter, CommentState, CommentView
from discuss.interface.error import rejected_save, to_http_exception

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies
    author_id: str | None = None
    author_name: str | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    body: str = Field(min_length=1, max_length=10000)


class ChangeCommentStateAPIRequest(BaseModel):
    """API request for moderating a comment."""

    state: CommentState = CommentState.DELETED
    restore: bool = False


@router.get("/{thread_id}/comments", response_model=GetThreadCommentsResponse)
async def get_thread_comments(
    thread_id: str,
    get_thread_comments_use_case: FromDishka[GetThreadCommentsUseCase],
    view: CommentView = CommentView.TREE,
    sorter: CommentSorter | None = None,
    display_depth: int | None = None,
    permalink: str | None = Query(default=None),
) -> GetThreadCommentsResponse:
    """Get the comments of a thread, creating the thread on first view.

    Args:
        thread_id: Thread ID
        get_thread_comments_use_case: Get thread comments use case from DI
        view: `tree` for nested replies, `flat` for a plain list
        sorter: Sort order (configured default if omitted)
        display_depth: Deepest level to show (0 for all)
        permalink: URL-encoded permalink stored if the thread is created

    Returns:
        The thread and its comments
    """
    try:
        return await get_thread_comments_use_case.execute(
            GetThreadCommentsRequest(
                thread_id=thread_id,
                permalink=permalink,
                view=view,
                sorter=sorter,
                display_depth=display_depth,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{thread_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    thread_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a thread or reply to another comment.

    Args:
        thread_id: Thread ID
        request: Comment body, optional parent and author
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: 404 for an unknown thread or parent, 403 if the thread
            is closed, 400 for an invalid parent, 409 if the store refused
    """
    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                thread_id=thread_id,
                body=request.body,
                parent_id=request.parent_id,
                author_id=request.author_id,
                author_name=request.author_name,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )

    if not result.saved:
        raise rejected_save("Comment")
    return result


@router.get("/{thread_id}/comments/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    thread_id: str,
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get one comment of a thread with the comment it replies to."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(thread_id=thread_id, comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.put(
    "/{thread_id}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    thread_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Edit the body of a comment.

    Args:
        thread_id: Thread ID
        comment_id: Comment UUID
        request: New body
        update_comment_use_case: Update comment use case from DI

    Returns:
        Updated comment details
    """
    try:
        result = await update_comment_use_case.execute(
            UpdateCommentRequest(
                thread_id=thread_id, comment_id=comment_id, body=request.body
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )

    if not result.saved:
        raise rejected_save("Comment")
    return result


@router.patch(
    "/{thread_id}/comments/{comment_id}/state",
    response_model=ChangeCommentStateResponse,
)
async def change_comment_state(
    thread_id: str,
    comment_id: str,
    request: ChangeCommentStateAPIRequest,
    change_comment_state_use_case: FromDishka[ChangeCommentStateUseCase],
) -> ChangeCommentStateResponse:
    """Delete, flag, approve or restore a comment.

    Without a body the comment is deleted.
    """
    try:
        result = await change_comment_state_use_case.execute(
            ChangeCommentStateRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                state=request.state,
                restore=request.restore,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    if not result.saved:
        raise rejected_save("Comment")
    return result
