"""Get threads use case."""

from pydantic import BaseModel

from discuss.domain.service import ThreadService
from discuss.domain.value import ThreadId

from .common import ThreadItem


class GetThreadsRequest(BaseModel):
    """Get threads request."""

    thread_ids: list[str]


class GetThreadsResponse(BaseModel):
    """Get threads response."""

    threads: list[ThreadItem]
    total: int


class GetThreadsUseCase:
    """Use case for fetching several threads at once.

    Typically used by listing pages that show a comment count next to each
    piece of content.
    """

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadsRequest) -> GetThreadsResponse:
        """Fetch the requested threads; unknown ids are left out.

        Raises:
            ValidationError: If no thread id was given
        """
        threads = await self.thread_service.find_threads(
            [ThreadId(thread_id) for thread_id in request.thread_ids]
        )
        items = [ThreadItem.from_thread(thread) for thread in threads]
        return GetThreadsResponse(threads=items, total=len(items))
