"""Update comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import ThreadId

from .common import CommentItem, parse_comment_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    thread_id: str
    comment_id: str  # UUID string
    body: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    saved: bool
    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing the body of a comment."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        """Initialize update comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with new body

        Returns:
            The edited comment

        Raises:
            NotFoundError: If the thread or comment does not exist
            ValidationError: If the comment is deleted or the body is invalid
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_thread_comment(
            thread, parse_comment_id(request.comment_id)
        )

        edited = self.comment_service.edit_comment(comment, request.body)
        saved = await self.comment_service.save_comment(edited)

        return UpdateCommentResponse(
            saved=saved, comment=CommentItem.from_comment(edited)
        )
