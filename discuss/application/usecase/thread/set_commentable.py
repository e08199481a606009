"""Set commentable use case."""

from pydantic import BaseModel

from discuss.domain.service import ThreadService
from discuss.domain.value import ThreadId

from .common import ThreadItem


class SetCommentableRequest(BaseModel):
    """Set commentable request."""

    thread_id: str
    is_commentable: bool


class SetCommentableResponse(BaseModel):
    """Set commentable response."""

    thread: ThreadItem


class SetCommentableUseCase:
    """Use case for opening or closing a thread for new comments."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize set commentable use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: SetCommentableRequest) -> SetCommentableResponse:
        """Execute set commentable flow.

        Args:
            request: Set commentable request

        Returns:
            The updated thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        thread = await self.thread_service.edit_commentable(
            thread, request.is_commentable
        )
        return SetCommentableResponse(thread=ThreadItem.from_thread(thread))
