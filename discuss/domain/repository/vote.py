"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.vote import Vote
from discuss.domain.value import CommentId, VoterId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_comment(
        self, voter_id: VoterId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a voter's vote on a comment.

        Args:
            voter_id: The voter's identity
            comment_id: The comment ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes cast on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Votes in the order they were cast
        """
        pass

    @abstractmethod
    async def add(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to insert

        Returns:
            The inserted vote

        Raises:
            IntegrityError: If the voter already voted on this comment
        """
        pass

    @abstractmethod
    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum the values of all votes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            The total (0 when there are no votes)
        """
        pass
