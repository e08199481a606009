"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from discuss.domain.model.thread import Thread
from discuss.domain.repository.thread import ThreadRepository
from discuss.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> list[Thread]:
        """Find several threads, in the order the IDs were given."""
        return [self._threads[tid] for tid in thread_ids if tid in self._threads]

    async def add(self, thread: Thread) -> Thread:
        """Insert a thread.

        Raises:
            IntegrityError: If a thread with the same ID exists
        """
        if thread.id in self._threads:
            raise IntegrityError("Duplicate thread", None, Exception())
        self._threads[thread.id] = thread
        return thread

    async def save(self, thread: Thread) -> Thread:
        """Update permalink and commentable flag, keeping the counters."""
        stored = self._threads.get(thread.id)
        if stored is None:
            return thread
        updated = stored.model_copy(
            update={
                "permalink": thread.permalink,
                "is_commentable": thread.is_commentable,
            }
        )
        self._threads[thread.id] = updated
        return updated

    async def increment_comment_count(
        self, thread_id: ThreadId, last_comment_at: datetime
    ) -> None:
        """Increment num_comments by 1."""
        thread = self._threads.get(thread_id)
        if thread:
            latest = last_comment_at
            if thread.last_comment_at and thread.last_comment_at > latest:
                latest = thread.last_comment_at
            self._threads[thread_id] = thread.model_copy(
                update={
                    "num_comments": thread.num_comments + 1,
                    "last_comment_at": latest,
                }
            )
