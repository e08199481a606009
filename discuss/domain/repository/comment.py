"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, CommentSorter, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            for_update: Lock the row until the end of the transaction

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(
        self,
        thread_id: ThreadId,
        max_depth: Optional[int] = None,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
    ) -> List[Comment]:
        """Find the comments of a thread as a flat, sorted list.

        Comments in every state are returned; hiding deleted or pending
        comments is a rendering concern.

        Args:
            thread_id: The thread ID
            max_depth: Skip comments deeper than this (None or 0 for all)
            sorter: Order of the returned list

        Returns:
            List of comments in the requested order
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The inserted comment

        Raises:
            IntegrityError: If the comment conflicts with stored data
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Update an existing comment's body and state.

        Args:
            comment: The comment to update

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_score(self, comment_id: CommentId, score: int) -> None:
        """Store a recomputed score on a comment.

        Args:
            comment_id: The comment ID
            score: Sum of the comment's vote values
        """
        pass
