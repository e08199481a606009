"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from discuss.domain.model.vote import Vote
from discuss.domain.repository.vote import VoteRepository
from discuss.domain.value import CommentId, VoterId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_voter_and_comment(
        self, voter_id: VoterId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment."""
        for vote in self._votes:
            if vote.voter_id == voter_id and vote.comment_id == comment_id:
                return vote
        return None

    async def find_by_comment(self, comment_id: CommentId) -> list[Vote]:
        """Find all votes on a comment, in the order they were added."""
        return [v for v in self._votes if v.comment_id == comment_id]

    async def add(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        # Same check as the unique_vote constraint
        if any(
            v.voter_id == vote.voter_id and v.comment_id == vote.comment_id
            for v in self._votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum vote values on a comment."""
        return sum(v.value for v in self._votes if v.comment_id == comment_id)
