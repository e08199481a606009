"""Thread response items shared by the thread use cases."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import Thread


class ThreadItem(BaseModel):
    """Thread as returned to clients."""

    thread_id: str
    permalink: str | None
    is_commentable: bool
    num_comments: int
    last_comment_at: datetime | None
    created_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadItem":
        return cls(
            thread_id=thread.id,
            permalink=thread.permalink,
            is_commentable=thread.is_commentable,
            num_comments=thread.num_comments,
            last_comment_at=thread.last_comment_at,
            created_at=thread.created_at,
        )
