"""Change comment state use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentService, ThreadService
from discuss.domain.value import CommentState, ThreadId

from .common import CommentItem, parse_comment_id


class ChangeCommentStateRequest(BaseModel):
    """Change comment state request.

    With ``restore`` set, ``state`` is ignored and the comment goes back to
    the state it had before its last transition.
    """

    thread_id: str
    comment_id: str  # UUID string
    state: CommentState = CommentState.DELETED
    restore: bool = False


class ChangeCommentStateResponse(BaseModel):
    """Change comment state response."""

    saved: bool
    comment: CommentItem


class ChangeCommentStateUseCase:
    """Use case for moderating a comment (delete, spam, approve, restore)."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(
        self, request: ChangeCommentStateRequest
    ) -> ChangeCommentStateResponse:
        """Move a comment to another state and save it.

        Raises:
            NotFoundError: If the thread or comment does not exist
            InvalidStateTransitionError: If the transition is not allowed
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_thread_comment(
            thread, parse_comment_id(request.comment_id)
        )

        if request.restore:
            changed = self.comment_service.restore_comment(comment)
        else:
            changed = self.comment_service.set_state(comment, request.state)

        saved = await self.comment_service.save_comment(changed)
        return ChangeCommentStateResponse(
            saved=saved, comment=CommentItem.from_comment(changed)
        )
