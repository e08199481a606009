"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from discuss.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetCommentScoreRequest,
    GetCommentScoreResponse,
    GetCommentScoreUseCase,
)
from discuss.domain.error import DomainError
from discuss.interface.error import rejected_save, to_http_exception

router = APIRouter(prefix="/threads", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    voter_id: str = Field(min_length=1, max_length=255)
    value: int = 1


@router.get(
    "/{thread_id}/comments/{comment_id}/votes",
    response_model=GetCommentScoreResponse,
)
async def get_comment_score(
    thread_id: str,
    comment_id: str,
    get_comment_score_use_case: FromDishka[GetCommentScoreUseCase],
) -> GetCommentScoreResponse:
    """Get the score of a comment."""
    try:
        return await get_comment_score_use_case.execute(
            GetCommentScoreRequest(thread_id=thread_id, comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{thread_id}/comments/{comment_id}/votes",
    response_model=CastVoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def cast_vote(
    thread_id: str,
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a comment.

    Args:
        thread_id: Thread ID
        comment_id: Comment UUID
        request: Voter identity and vote value
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        Vote details with the comment's new score

    Raises:
        HTTPException: 409 if the voter already voted, 400 for a self-vote,
            404 for an unknown thread or comment
    """
    try:
        result = await cast_vote_use_case.execute(
            CastVoteRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                voter_id=request.voter_id,
                value=request.value,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error casting vote", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )

    if not result.saved:
        raise rejected_save("Vote")
    return result
