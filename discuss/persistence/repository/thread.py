"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Thread
from discuss.domain.repository import ThreadRepository
from discuss.domain.value import ThreadId
from discuss.persistence.mappers import row_to_thread, thread_to_dict
from discuss.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_thread(dict(row)) if row else None

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find several threads, in the order the IDs were given."""
        if not thread_ids:
            return []

        stmt = select(threads_table).where(threads_table.c.id.in_(thread_ids))
        result = await self.session.execute(stmt)
        found = {
            row["id"]: row_to_thread(dict(row)) for row in result.mappings().all()
        }
        return [found[thread_id] for thread_id in thread_ids if thread_id in found]

    async def add(self, thread: Thread) -> Thread:
        """Insert a new thread.

        The insert runs in a savepoint so a duplicate key leaves the
        surrounding transaction usable.
        """
        stmt = insert(threads_table).values(**thread_to_dict(thread))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return thread

    async def save(self, thread: Thread) -> Thread:
        """Update a thread's permalink and commentable flag."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread.id)
            .values(permalink=thread.permalink, is_commentable=thread.is_commentable)
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_thread(dict(row)) if row else thread

    async def increment_comment_count(
        self, thread_id: ThreadId, last_comment_at: datetime
    ) -> None:
        """Atomically increment num_comments by 1."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(
                num_comments=threads_table.c.num_comments + 1,
                last_comment_at=func.greatest(
                    func.coalesce(threads_table.c.last_comment_at, last_comment_at),
                    last_comment_at,
                ),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
