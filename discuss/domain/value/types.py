"""Domain value types for Discuss."""

from enum import Enum


class CommentState(str, Enum):
    """Moderation state of a comment."""

    VISIBLE = "visible"
    DELETED = "deleted"
    SPAM = "spam"
    PENDING = "pending"


class CommentSorter(str, Enum):
    """Sort orders the comment store knows how to apply.

    The tree builder keeps whatever order the store returns, so this enum is
    the only place a caller gets to choose it.
    """

    DATE_ASC = "date_asc"  # created_at ASC
    DATE_DESC = "date_desc"  # created_at DESC
    SCORE_DESC = "score_desc"  # score DESC, then created_at ASC


class CommentView(str, Enum):
    """Shape of a thread's comment listing."""

    TREE = "tree"
    FLAT = "flat"
