"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from discuss.domain.model.thread import Thread
from discuss.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's caller-supplied identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find all threads whose id is in the given list.

        Unknown ids are skipped.

        Args:
            thread_ids: Thread identifiers

        Returns:
            Matching threads, in the order of thread_ids
        """
        pass

    @abstractmethod
    async def add(self, thread: Thread) -> Thread:
        """Insert a new thread.

        Args:
            thread: The thread to insert

        Returns:
            The inserted thread

        Raises:
            IntegrityError: If a thread with this id already exists
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Update an existing thread (commentable flag and permalink).

        Counters are not written here; use increment_comment_count.

        Args:
            thread: The thread to update

        Returns:
            The stored thread
        """
        pass

    @abstractmethod
    async def increment_comment_count(
        self, thread_id: ThreadId, last_comment_at: datetime
    ) -> None:
        """Atomically add one to the thread's comment count.

        Args:
            thread_id: The thread ID
            last_comment_at: Creation time of the comment being counted
        """
        pass
