"""Create thread use case."""

from pydantic import BaseModel

from discuss.domain.service import ThreadService
from discuss.domain.value import ThreadId

from .common import ThreadItem


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    thread_id: str
    permalink: str | None = None  # URL-encoded
    is_commentable: bool = True


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread: ThreadItem


class CreateThreadUseCase:
    """Use case for registering a thread for a piece of external content."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Args:
            request: Create thread request

        Returns:
            The saved thread

        Raises:
            DuplicateThreadError: If the thread id is already taken
            ValidationError: If the thread id is empty or too long
        """
        thread = self.thread_service.create_thread(
            ThreadId(request.thread_id), request.permalink
        )
        if not request.is_commentable:
            thread = thread.evolve(is_commentable=False)

        thread = await self.thread_service.add_thread(thread)
        return CreateThreadResponse(thread=ThreadItem.from_thread(thread))
