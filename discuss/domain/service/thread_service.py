"""Thread domain service."""

from datetime import datetime
from typing import Sequence
from urllib.parse import unquote

import logfire
from sqlalchemy.exc import IntegrityError

from discuss.domain.error import DuplicateThreadError, NotFoundError, ValidationError
from discuss.domain.model.thread import Thread
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import ThreadId


class ThreadService:
    """Domain service for thread operations."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    def create_thread(
        self, thread_id: ThreadId, permalink: str | None = None
    ) -> Thread:
        """Build a new, unsaved thread.

        Clients send the permalink URL-encoded; it is stored decoded.

        Args:
            thread_id: Caller-supplied thread id
            permalink: URL of the content the thread belongs to

        Returns:
            Unsaved thread

        Raises:
            ValidationError: If the thread id is empty or too long
        """
        try:
            return Thread(
                id=thread_id,
                permalink=unquote(permalink) if permalink else None,
                is_commentable=True,
                num_comments=0,
                last_comment_at=None,
                created_at=datetime.now(),
            )
        except ValueError as e:
            raise ValidationError(str(e))

    async def add_thread(self, thread: Thread) -> Thread:
        """Save a thread for the first time.

        Args:
            thread: Unsaved thread

        Returns:
            Saved thread

        Raises:
            DuplicateThreadError: If the id is already taken
        """
        with logfire.span("thread_service.add_thread", thread_id=thread.id):
            existing = await self.thread_repository.find_by_id(thread.id)
            if existing:
                logfire.warn("Duplicate thread id", thread_id=thread.id)
                raise DuplicateThreadError(thread.id)

            try:
                saved = await self.thread_repository.add(thread)
            except IntegrityError:
                # Lost a race against a concurrent insert of the same id
                logfire.warn("Duplicate thread insert rejected", thread_id=thread.id)
                raise DuplicateThreadError(thread.id)

            logfire.info(
                "Thread created", thread_id=saved.id, permalink=saved.permalink
            )
            return saved

    async def save_thread(self, thread: Thread) -> Thread:
        """Persist changes to an existing thread.

        Args:
            thread: Thread with updated fields

        Returns:
            Saved thread

        Raises:
            NotFoundError: If the thread was never saved
        """
        with logfire.span("thread_service.save_thread", thread_id=thread.id):
            existing = await self.thread_repository.find_by_id(thread.id)
            if not existing:
                logfire.warn("Save of unknown thread", thread_id=thread.id)
                raise NotFoundError("Thread", thread.id)

            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread saved",
                thread_id=saved.id,
                is_commentable=saved.is_commentable,
            )
            return saved

    async def find_thread(self, thread_id: ThreadId) -> Thread | None:
        """Get a thread by ID.

        Args:
            thread_id: Thread ID

        Returns:
            Thread if found, None otherwise
        """
        with logfire.span("thread_service.find_thread", thread_id=thread_id):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread:
                logfire.info("Thread found", thread_id=thread_id)
            else:
                logfire.warn("Thread not found", thread_id=thread_id)
            return thread

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.find_thread(thread_id)
        if not thread:
            raise NotFoundError("Thread", thread_id)
        return thread

    async def find_threads(self, thread_ids: Sequence[ThreadId]) -> list[Thread]:
        """Get several threads at once.

        Args:
            thread_ids: Thread IDs (unknown ids are skipped)

        Returns:
            Threads found, in the order requested

        Raises:
            ValidationError: If no id was given
        """
        if not thread_ids:
            raise ValidationError("Cannot query threads without ids")

        with logfire.span("thread_service.find_threads", count=len(thread_ids)):
            threads = await self.thread_repository.find_by_ids(thread_ids)
            logfire.info(
                "Threads retrieved", requested=len(thread_ids), found=len(threads)
            )
            return threads

    async def get_or_create_thread(
        self, thread_id: ThreadId, permalink: str | None = None
    ) -> Thread:
        """Get a thread, creating it on first access.

        Embedding pages never create their thread explicitly; the first
        listing of its comments does.

        Args:
            thread_id: Thread ID
            permalink: URL-encoded permalink used if the thread is created

        Returns:
            The existing or newly created thread
        """
        thread = await self.find_thread(thread_id)
        if thread:
            return thread

        try:
            return await self.add_thread(self.create_thread(thread_id, permalink))
        except DuplicateThreadError:
            # Created concurrently by another request
            return await self.get_thread(thread_id)

    async def edit_commentable(self, thread: Thread, value: bool) -> Thread:
        """Open or close a thread for new comments.

        Args:
            thread: Thread to change
            value: True to accept comments, False to close the thread

        Returns:
            Saved thread
        """
        with logfire.span(
            "thread_service.edit_commentable", thread_id=thread.id, value=value
        ):
            return await self.save_thread(
                thread.evolve(is_commentable=value)
            )
