"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from discuss.domain.error import (
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import Thread
from discuss.domain.repository import CommentRepository, ThreadRepository
from discuss.domain.value import CommentId, CommentSorter, CommentState

from .comment_tree import CommentNode, CommentTreeBuilder, normalize_depth

# Moderation transitions a comment may take. Setting the current state again
# is always accepted as a no-op.
ALLOWED_TRANSITIONS: dict[CommentState, frozenset[CommentState]] = {
    CommentState.VISIBLE: frozenset(
        {CommentState.DELETED, CommentState.SPAM, CommentState.PENDING}
    ),
    CommentState.PENDING: frozenset(
        {CommentState.VISIBLE, CommentState.DELETED, CommentState.SPAM}
    ),
    CommentState.SPAM: frozenset({CommentState.VISIBLE, CommentState.DELETED}),
    CommentState.DELETED: frozenset({CommentState.VISIBLE}),
}

# Fields fixed when a comment is first saved
STRUCTURAL_FIELDS = ("thread_id", "parent_id", "ancestors", "depth", "created_at")


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
        tree_builder: CommentTreeBuilder,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository (for comment counters)
            tree_builder: Builder for nested comment listings
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository
        self.tree_builder = tree_builder

    def create_comment(
        self,
        thread: Thread,
        body: str,
        parent: Optional[Comment] = None,
        author_id: str | None = None,
        author_name: str | None = None,
        state: CommentState = CommentState.VISIBLE,
    ) -> Comment:
        """Build a new, unsaved comment on a thread or reply to a comment.

        Args:
            thread: Thread the comment belongs to
            body: Comment text
            parent: Comment being replied to (None for top-level)
            author_id: Opaque author identifier
            author_name: Author display name
            state: Initial moderation state

        Returns:
            Unsaved comment with ancestors and depth set

        Raises:
            ValidationError: If parent belongs to another thread
        """
        ancestors: tuple[CommentId, ...] = ()
        if parent is not None:
            if parent.thread_id != thread.id:
                logfire.warn(
                    "Parent comment does not belong to thread",
                    parent_id=str(parent.id),
                    parent_thread_id=parent.thread_id,
                    target_thread_id=thread.id,
                )
                raise ValidationError("parent not in thread")
            ancestors = parent.child_ancestors()

        now = datetime.now()
        try:
            return Comment(
                id=CommentId(uuid4()),
                thread_id=thread.id,
                body=body,
                author_id=author_id,
                author_name=author_name,
                parent_id=parent.id if parent is not None else None,
                ancestors=ancestors,
                depth=len(ancestors),
                state=state,
                previous_state=None,
                score=0,
                created_at=now,
                updated_at=now,
            )
        except ValueError as e:
            raise ValidationError(str(e))

    async def save_comment(self, comment: Comment) -> bool:
        """Persist a new or edited comment.

        The first save of a comment that is not deleted adds one to the
        thread's comment count, in the same transaction. Re-saves never touch
        the counter.

        Args:
            comment: Comment to persist

        Returns:
            True if saved, False if the store rejected the write

        Raises:
            NotFoundError: If the comment's thread does not exist
            ValidationError: If a structural field of a stored comment changed
        """
        with logfire.span(
            "comment_service.save_comment",
            comment_id=str(comment.id),
            thread_id=comment.thread_id,
            state=comment.state.value,
        ):
            existing = await self.comment_repository.find_by_id(comment.id)

            if existing is None:
                thread = await self.thread_repository.find_by_id(comment.thread_id)
                if not thread:
                    logfire.warn(
                        "Comment saved on non-existent thread",
                        thread_id=comment.thread_id,
                    )
                    raise NotFoundError("Thread", comment.thread_id)

                try:
                    await self.comment_repository.add(comment)
                except IntegrityError as e:
                    logfire.warn(
                        "Comment insert rejected",
                        comment_id=str(comment.id),
                        error=str(e),
                    )
                    return False

                if not comment.is_deleted:
                    await self.thread_repository.increment_comment_count(
                        comment.thread_id, comment.created_at
                    )

                logfire.info(
                    "Comment created",
                    comment_id=str(comment.id),
                    thread_id=comment.thread_id,
                    depth=comment.depth,
                )
                return True

            changed = [
                name
                for name in STRUCTURAL_FIELDS
                if getattr(existing, name) != getattr(comment, name)
            ]
            if changed:
                logfire.warn(
                    "Attempt to change structural comment fields",
                    comment_id=str(comment.id),
                    fields=changed,
                )
                raise ValidationError(
                    f"Cannot change {', '.join(changed)} of a saved comment"
                )

            try:
                await self.comment_repository.save(comment)
            except IntegrityError as e:
                logfire.warn(
                    "Comment update rejected", comment_id=str(comment.id), error=str(e)
                )
                return False

            logfire.info(
                "Comment updated",
                comment_id=str(comment.id),
                state=comment.state.value,
            )
            return True

    def edit_comment(self, comment: Comment, body: str) -> Comment:
        """Replace the body of a comment.

        Args:
            comment: Comment to edit
            body: New text

        Returns:
            Unsaved edited comment

        Raises:
            ValidationError: If the comment is deleted or the body is invalid
        """
        if comment.is_deleted:
            raise ValidationError(f"Cannot edit deleted comment {comment.id}")
        try:
            return comment.evolve(body=body, updated_at=datetime.now())
        except ValueError as e:
            raise ValidationError(str(e))

    def set_state(self, comment: Comment, state: CommentState) -> Comment:
        """Move a comment to another moderation state.

        Args:
            comment: Comment to change
            state: Target state

        Returns:
            Unsaved comment in the new state (unchanged if already there)

        Raises:
            InvalidStateTransitionError: If the transition is not allowed
        """
        if state == comment.state:
            return comment

        if state not in ALLOWED_TRANSITIONS[comment.state]:
            logfire.warn(
                "Rejected comment state transition",
                comment_id=str(comment.id),
                current=comment.state.value,
                target=state.value,
            )
            raise InvalidStateTransitionError(comment.state.value, state.value)

        return comment.evolve(
            state=state, previous_state=comment.state, updated_at=datetime.now()
        )

    def restore_comment(self, comment: Comment) -> Comment:
        """Return a comment to the state it had before its last transition.

        Comments without a recorded previous state go back to visible. The
        restored comment keeps no previous state, so restoring it again is a
        no-op rather than an undo of the restore.
        """
        target = comment.previous_state or CommentState.VISIBLE
        restored = self.set_state(comment, target)
        if restored.previous_state is None:
            return restored
        return restored.evolve(previous_state=None)

    async def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.find_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.find_comment(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_thread_comment(
        self, thread: Thread, comment_id: CommentId
    ) -> Comment:
        """Get a comment that must belong to the given thread.

        Raises:
            NotFoundError: If the comment does not exist in this thread
        """
        comment = await self.find_comment(comment_id)
        if not comment or comment.thread_id != thread.id:
            raise NotFoundError(
                "Comment", f"{comment_id} (thread {thread.id})"
            )
        return comment

    async def get_valid_parent(
        self, thread: Thread, parent_id: CommentId | None
    ) -> Comment | None:
        """Resolve the comment a new reply will be attached to.

        Args:
            thread: Thread the reply is posted in
            parent_id: Requested parent (None for a top-level comment)

        Returns:
            The parent comment, or None

        Raises:
            NotFoundError: If the parent does not exist
            ValidationError: If the parent belongs to another thread
        """
        if parent_id is None:
            return None

        parent = await self.find_comment(parent_id)
        if not parent:
            raise NotFoundError("Parent comment", str(parent_id))
        if parent.thread_id != thread.id:
            raise ValidationError("parent not in thread")
        return parent

    async def get_comments(
        self,
        thread: Thread,
        max_depth: Optional[int] = None,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
    ) -> list[Comment]:
        """Get the comments of a thread as a flat, sorted list.

        Args:
            thread: Thread
            max_depth: Deepest level to include (None or 0 for all)
            sorter: Sort order applied by the store

        Returns:
            Comments in store order
        """
        with logfire.span(
            "comment_service.get_comments",
            thread_id=thread.id,
            max_depth=max_depth,
            sorter=sorter.value,
        ):
            comments = await self.comment_repository.find_by_thread(
                thread_id=thread.id,
                max_depth=normalize_depth(max_depth),
                sorter=sorter,
            )
            logfire.info(
                "Comments retrieved for thread",
                thread_id=thread.id,
                count=len(comments),
            )
            return comments

    async def get_comment_tree(
        self,
        thread: Thread,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
        max_depth: Optional[int] = None,
    ) -> list[CommentNode]:
        """Get the comments of a thread as a nested forest.

        Args:
            thread: Thread
            sorter: Order of roots and of siblings
            max_depth: Deepest level to include (None or 0 for all)

        Returns:
            Root nodes with replies nested below them
        """
        comments = await self.get_comments(thread, max_depth, sorter)
        return self.tree_builder.build_tree(comments, max_depth)

    async def get_flat_comments(
        self,
        thread: Thread,
        sorter: CommentSorter = CommentSorter.DATE_DESC,
        max_depth: Optional[int] = None,
    ) -> list[CommentNode]:
        """Get the comments of a thread as childless nodes, in store order."""
        comments = await self.get_comments(thread, max_depth, sorter)
        return self.tree_builder.build_flat(comments, max_depth)
