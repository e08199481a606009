"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from discuss.domain.error import DuplicateVoteError, NotFoundError, ValidationError
from discuss.domain.model.comment import Comment
from discuss.domain.model.vote import Vote
from discuss.domain.repository import CommentRepository, VoteRepository
from discuss.domain.value import VoteId, VoterId


class VoteService:
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository (for score updates)
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    def create_vote(self, comment: Comment, voter_id: VoterId, value: int = 1) -> Vote:
        """Build a new, unsaved vote on a comment.

        Args:
            comment: Comment being voted on
            voter_id: Identity of the voter
            value: Vote value (+1 unless the caller says otherwise)

        Returns:
            Unsaved vote
        """
        try:
            return Vote(
                id=VoteId(uuid4()),
                comment_id=comment.id,
                voter_id=voter_id,
                value=value,
                created_at=datetime.now(),
            )
        except ValueError as e:
            raise ValidationError(str(e))

    async def save_vote(self, vote: Vote) -> bool:
        """Record a vote and recompute the comment's score.

        The comment row is locked first, so concurrent votes on the same
        comment are applied one at a time and every stored score is the sum
        of a committed set of votes.

        Args:
            vote: Unsaved vote

        Returns:
            True if saved, False if the store rejected the vote

        Raises:
            NotFoundError: If the comment does not exist
            ValidationError: If voters vote on their own comment
            DuplicateVoteError: If the voter already voted on the comment
        """
        with logfire.span(
            "vote_service.save_vote",
            comment_id=str(vote.comment_id),
            voter_id=vote.voter_id,
            value=vote.value,
        ):
            comment = await self.comment_repository.find_by_id(
                vote.comment_id, for_update=True
            )
            if not comment:
                logfire.warn(
                    "Vote on non-existent comment", comment_id=str(vote.comment_id)
                )
                raise NotFoundError("Comment", str(vote.comment_id))

            if comment.author_id is not None and comment.author_id == vote.voter_id:
                logfire.warn(
                    "Self-vote attempt",
                    comment_id=str(comment.id),
                    voter_id=vote.voter_id,
                )
                raise ValidationError("Cannot vote on your own comment")

            existing = await self.vote_repository.find_by_voter_and_comment(
                vote.voter_id, vote.comment_id
            )
            if existing:
                logfire.warn(
                    "Duplicate vote attempt",
                    comment_id=str(comment.id),
                    voter_id=vote.voter_id,
                )
                raise DuplicateVoteError(str(comment.id), vote.voter_id)

            try:
                await self.vote_repository.add(vote)
            except IntegrityError:
                logfire.warn(
                    "Vote insert rejected",
                    comment_id=str(comment.id),
                    voter_id=vote.voter_id,
                )
                return False

            score = await self.vote_repository.sum_by_comment(vote.comment_id)
            await self.comment_repository.update_score(vote.comment_id, score)

            logfire.info(
                "Vote recorded",
                comment_id=str(comment.id),
                vote_id=str(vote.id),
                score=score,
            )
            return True

    def get_score(self, comment: Comment) -> int:
        """Current score of a comment.

        Reads the stored total; votes are not summed again here.
        """
        return comment.score

    async def get_votes(self, comment: Comment) -> list[Vote]:
        """Get all votes cast on a comment.

        Args:
            comment: Comment

        Returns:
            Votes in the order they were cast
        """
        with logfire.span("vote_service.get_votes", comment_id=str(comment.id)):
            votes = await self.vote_repository.find_by_comment(comment.id)
            logfire.info(
                "Votes retrieved", comment_id=str(comment.id), count=len(votes)
            )
            return votes

    async def has_voted(self, comment: Comment, voter_id: VoterId) -> bool:
        """Check whether a voter has voted on a comment."""
        vote = await self.vote_repository.find_by_voter_and_comment(
            voter_id, comment.id
        )
        return vote is not None
