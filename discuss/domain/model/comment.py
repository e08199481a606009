"""Comment entity.

Comments are nested under a thread with unlimited depth. Each comment carries
its full ancestor path (root first, parent last), so a thread's comment tree
can be rebuilt from a flat list without recursive queries.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, CommentState, ThreadId, encode_path


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - ancestors: Ids from the root comment down to parent_id
    - depth: Nesting level, always len(ancestors)
    """

    id: CommentId
    thread_id: ThreadId
    body: str = Field(min_length=1, max_length=10000)
    author_id: Optional[str] = None
    author_name: Optional[str] = None
    parent_id: Optional[CommentId] = None
    ancestors: tuple[CommentId, ...] = ()
    depth: int = Field(default=0, ge=0)
    state: CommentState = CommentState.VISIBLE
    previous_state: Optional[CommentState] = None
    score: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_threading(self) -> "Comment":
        """Validate that parent, ancestors and depth agree."""
        if self.depth != len(self.ancestors):
            raise ValueError(
                f"Depth {self.depth} does not match {len(self.ancestors)} ancestors"
            )
        expected_parent = self.ancestors[-1] if self.ancestors else None
        if self.parent_id != expected_parent:
            raise ValueError("Parent must be the last ancestor")
        if self.id in self.ancestors:
            raise ValueError("Comment cannot be its own ancestor")
        return self

    @property
    def path(self) -> str:
        """Ancestor path in its stored string form."""
        return encode_path(self.ancestors)

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been soft-deleted."""
        return self.state == CommentState.DELETED

    def child_ancestors(self) -> tuple[CommentId, ...]:
        """Ancestor path for a direct reply to this comment."""
        return self.ancestors + (self.id,)
