"""Get comment use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import ThreadId

from .common import CommentItem, parse_comment_id


class GetCommentRequest(BaseModel):
    """Get comment request."""

    thread_id: str
    comment_id: str  # UUID string


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem
    parent: CommentItem | None
    depth: int


class GetCommentUseCase:
    """Use case for fetching one comment of a thread with its parent."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Fetch a comment and the comment it replies to.

        Raises:
            NotFoundError: If the thread or the comment does not exist
            ValidationError: If the comment id is malformed
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_thread_comment(
            thread, parse_comment_id(request.comment_id)
        )

        parent = None
        if comment.parent_id is not None:
            parent = await self.comment_service.find_comment(comment.parent_id)

        return GetCommentResponse(
            comment=CommentItem.from_comment(comment),
            parent=CommentItem.from_comment(parent) if parent else None,
            depth=comment.depth,
        )
