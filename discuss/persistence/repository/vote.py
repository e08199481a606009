"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Vote
from discuss.domain.repository import VoteRepository
from discuss.domain.value import CommentId, VoterId
from discuss.persistence.mappers import row_to_vote, vote_to_dict
from discuss.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_voter_and_comment(
        self, voter_id: VoterId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment, oldest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.comment_id == comment_id)
            .order_by(votes_table.c.created_at, votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def add(self, vote: Vote) -> Vote:
        """Insert a vote inside a savepoint.

        Raises:
            IntegrityError: If the voter already voted on the comment
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum vote values on a comment."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
