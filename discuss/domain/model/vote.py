"""Vote entity.

A vote carries an integer value (conventionally +1 or -1) cast by one voter on
one comment. Each voter can cast one vote per comment.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, VoteId, VoterId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per comment (checked by VoteService, enforced by
      the database unique constraint)
    - Votes are never edited; the comment score is the sum of their values
    """

    id: VoteId
    comment_id: CommentId
    voter_id: VoterId = Field(min_length=1, max_length=255)
    value: int = 1
    created_at: datetime = Field(default_factory=datetime.now)
