"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import asc, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, CommentSorter, ThreadId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table

# ORDER BY clauses per sorter; id is the final tie-breaker so listings are
# stable across calls
ORDERINGS = {
    CommentSorter.DATE_ASC: (
        asc(comments_table.c.created_at),
        asc(comments_table.c.id),
    ),
    CommentSorter.DATE_DESC: (
        desc(comments_table.c.created_at),
        desc(comments_table.c.id),
    ),
    CommentSorter.SCORE_DESC: (
        desc(comments_table.c.score),
        asc(comments_table.c.created_at),
        asc(comments_table.c.id),
    ),
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID, optionally locking its row."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_thread(
        self,
        thread_id: ThreadId,
        max_depth: Optional[int] = None,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
    ) -> List[Comment]:
        """Find all comments of a thread in the requested order."""
        stmt = select(comments_table).where(comments_table.c.thread_id == thread_id)

        if max_depth:
            stmt = stmt.where(comments_table.c.depth <= max_depth)

        stmt = stmt.order_by(*ORDERINGS[sorter])

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment inside a savepoint."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Update the mutable fields of a comment."""
        data = comment_to_dict(comment)
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(
                body=data["body"],
                state=data["state"],
                previous_state=data["previous_state"],
                updated_at=comment.updated_at,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else comment

    async def update_score(self, comment_id: CommentId, score: int) -> None:
        """Overwrite the stored score."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(score=score, updated_at=datetime.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
