"""Cast vote use case."""

from pydantic import BaseModel, Field

from discuss.application.usecase.comment.common import parse_comment_id
from discuss.domain.service import CommentService, ThreadService, VoteService
from discuss.domain.value import ThreadId, VoterId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    thread_id: str
    comment_id: str  # UUID string
    voter_id: str = Field(min_length=1)
    value: int = 1


class CastVoteResponse(BaseModel):
    """Cast vote response.

    ``saved`` is False when the store rejected the vote; ``score`` is the
    comment's score after the vote either way.
    """

    saved: bool
    vote_id: str
    comment_id: str
    value: int
    score: int


class CastVoteUseCase:
    """Use case for voting on a comment."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the comment's new score

        Raises:
            NotFoundError: If the thread or comment does not exist
            DuplicateVoteError: If the voter already voted on the comment
            ValidationError: If voters vote on their own comment
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_thread_comment(
            thread, parse_comment_id(request.comment_id)
        )

        vote = self.vote_service.create_vote(
            comment, VoterId(request.voter_id), request.value
        )
        saved = await self.vote_service.save_vote(vote)

        comment = await self.comment_service.get_comment(comment.id)
        return CastVoteResponse(
            saved=saved,
            vote_id=str(vote.id),
            comment_id=str(comment.id),
            value=vote.value,
            score=self.vote_service.get_score(comment),
        )
