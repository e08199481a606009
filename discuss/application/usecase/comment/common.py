"""Comment response items shared by the comment and vote use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from discuss.domain.error import ValidationError
from discuss.domain.model import Comment
from discuss.domain.service import CommentNode
from discuss.domain.value import CommentId, CommentState


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment id received as a string.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return CommentId(UUID(value))
    except ValueError:
        raise ValidationError(f"Invalid comment id: {value!r}")


class CommentItem(BaseModel):
    """Comment as returned to clients.

    The body of a deleted comment is withheld; the comment itself stays in
    listings so its replies keep their place in the tree.
    """

    comment_id: str
    thread_id: str
    parent_id: str | None
    ancestors: list[str]
    depth: int
    body: str | None
    author_id: str | None
    author_name: str | None
    state: CommentState
    score: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            thread_id=comment.thread_id,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            ancestors=[str(ancestor) for ancestor in comment.ancestors],
            depth=comment.depth,
            body=None if comment.is_deleted else comment.body,
            author_id=comment.author_id,
            author_name=comment.author_name,
            state=comment.state,
            score=comment.score,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentNodeItem(BaseModel):
    """Comment with its nested replies."""

    comment: CommentItem
    children: list["CommentNodeItem"] = []

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        return cls(
            comment=CommentItem.from_comment(node.comment),
            children=[cls.from_node(child) for child in node.children],
        )
