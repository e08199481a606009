"""Get comment score use case."""

from pydantic import BaseModel

from discuss.application.usecase.comment.common import parse_comment_id
from discuss.domain.service import CommentService, ThreadService, VoteService
from discuss.domain.value import ThreadId


class GetCommentScoreRequest(BaseModel):
    """Get comment score request."""

    thread_id: str
    comment_id: str  # UUID string


class GetCommentScoreResponse(BaseModel):
    """Get comment score response."""

    comment_id: str
    score: int


class GetCommentScoreUseCase:
    """Use case for reading the score of a comment."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentScoreRequest) -> GetCommentScoreResponse:
        """Read the stored score of a comment.

        Raises:
            NotFoundError: If the thread or comment does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_thread_comment(
            thread, parse_comment_id(request.comment_id)
        )
        return GetCommentScoreResponse(
            comment_id=str(comment.id), score=self.vote_service.get_score(comment)
        )
