"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Any, Callable, Optional

from sqlalchemy.exc import IntegrityError

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId, CommentSorter, ThreadId

# Sort keys mirroring the ORDER BY clauses of the PostgreSQL repository
SORT_KEYS: dict[CommentSorter, tuple[Callable[[Comment], Any], bool]] = {
    CommentSorter.DATE_ASC: (lambda c: (c.created_at, c.id), False),
    CommentSorter.DATE_DESC: (lambda c: (c.created_at, c.id), True),
    CommentSorter.SCORE_DESC: (lambda c: (-c.score, c.created_at, c.id), False),
}


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, comment_id: CommentId, for_update: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_thread(
        self,
        thread_id: ThreadId,
        max_depth: Optional[int] = None,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
    ) -> list[Comment]:
        """Find all comments of a thread in the requested order."""
        comments = [c for c in self._comments.values() if c.thread_id == thread_id]

        if max_depth:
            comments = [c for c in comments if c.depth <= max_depth]

        key, reverse = SORT_KEYS[sorter]
        comments.sort(key=key, reverse=reverse)
        return comments

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment.

        Raises:
            IntegrityError: On a duplicate ID or an unknown parent
        """
        if comment.id in self._comments:
            raise IntegrityError("Duplicate comment", None, Exception())
        if comment.parent_id is not None and comment.parent_id not in self._comments:
            raise IntegrityError("Unknown parent comment", None, Exception())
        self._comments[comment.id] = comment
        return comment

    async def save(self, comment: Comment) -> Comment:
        """Update body and state of a stored comment."""
        stored = self._comments.get(comment.id)
        if stored is None:
            return comment
        updated = stored.model_copy(
            update={
                "body": comment.body,
                "state": comment.state,
                "previous_state": comment.previous_state,
                "updated_at": comment.updated_at,
            }
        )
        self._comments[comment.id] = updated
        return updated

    async def update_score(self, comment_id: CommentId, score: int) -> None:
        """Overwrite the stored score."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"score": score, "updated_at": datetime.now()}
            )
