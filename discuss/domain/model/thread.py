"""Thread entity.

A thread is the discussion attached to one piece of external content. Its id
is chosen by the caller (usually derived from the content), never generated.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import ThreadId


class Thread(DomainModel):
    """Thread entity.

    Counters are denormalized:
    - num_comments: comments ever saved under the thread (soft-deleted included)
    - last_comment_at: creation time of the most recently saved comment
    """

    id: ThreadId = Field(min_length=1, max_length=255)
    permalink: Optional[str] = None
    is_commentable: bool = True
    num_comments: int = Field(default=0, ge=0)
    last_comment_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
