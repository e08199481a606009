"""Get thread use case."""

from pydantic import BaseModel

from discuss.domain.service import ThreadService
from discuss.domain.value import ThreadId

from .common import ThreadItem


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: ThreadItem


class GetThreadUseCase:
    """Use case for fetching a single thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Fetch a thread.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        return GetThreadResponse(thread=ThreadItem.from_thread(thread))
