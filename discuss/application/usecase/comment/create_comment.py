"""Create comment use case."""

import logfire
from pydantic import BaseModel

from discuss.domain.error import ThreadNotCommentableError
from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import ThreadId

from .common import CommentItem, parse_comment_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str
    body: str
    parent_id: str | None = None  # Parent comment ID for replies
    author_id: str | None = None
    author_name: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response.

    ``saved`` is False when the store rejected the comment.
    """

    saved: bool
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a thread or replying to another comment."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the thread exists and accepts comments
        2. Resolve the parent comment when replying
        3. Build and save the comment (bumps the thread's comment count)

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            NotFoundError: If the thread or parent comment does not exist
            ThreadNotCommentableError: If the thread is closed for comments
            ValidationError: If the parent is in another thread or the body
                is invalid
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        if not thread.is_commentable:
            logfire.warn("Comment on closed thread", thread_id=thread.id)
            raise ThreadNotCommentableError(thread.id)

        parent_id = parse_comment_id(request.parent_id) if request.parent_id else None
        parent = await self.comment_service.get_valid_parent(thread, parent_id)

        comment = self.comment_service.create_comment(
            thread,
            body=request.body,
            parent=parent,
            author_id=request.author_id,
            author_name=request.author_name,
        )
        saved = await self.comment_service.save_comment(comment)

        return CreateCommentResponse(
            saved=saved, comment=CommentItem.from_comment(comment)
        )
