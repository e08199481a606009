"""SQLAlchemy table definitions for Discuss.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(255), primary_key=True),  # Caller-supplied
    Column("permalink", Text, nullable=True),
    Column("is_commentable", Boolean, nullable=False, server_default="true"),
    Column("num_comments", Integer, nullable=False, server_default="0"),
    Column("last_comment_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("num_comments >= 0", name="num_comments_non_negative"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comment_state = postgresql.ENUM(
    "visible", "deleted", "spam", "pending", name="comment_state", create_type=False
)

comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id",
        String(255),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("ancestors", Text, nullable=False, server_default=""),  # a/b/c path
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("body", Text, nullable=False),
    Column("author_id", String(255), nullable=True),
    Column("author_name", String(255), nullable=True),
    Column("state", comment_state, nullable=False, server_default="visible"),
    Column("previous_state", comment_state, nullable=True),
    Column("score", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index("idx_comments_thread_id", comments_table.c.thread_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_thread_score", comments_table.c.thread_id, comments_table.c.score)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", String(255), nullable=False),
    Column("value", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "voter_id", name="unique_vote"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
