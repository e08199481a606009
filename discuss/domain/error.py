"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class MalformedPathError(ValidationError):
    """Raised when an ancestor path cannot be encoded or decoded."""

    pass


class InvalidStateTransitionError(ValidationError):
    """Raised when a comment state change is not an allowed transition."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move comment from {current} to {target}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateError(DomainError):
    """Raised when an entity collides with one that already exists."""

    pass


class DuplicateThreadError(DuplicateError):
    """Raised when a thread id is already taken."""

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Duplicate thread id '{thread_id}'")


class DuplicateVoteError(DuplicateError):
    """Raised when a voter has already voted on a comment."""

    def __init__(self, comment_id: str, voter_id: str):
        self.comment_id = comment_id
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id} already voted on comment {comment_id}")


class AccessDeniedError(DomainError):
    """Raised when an operation is not allowed on the target."""

    pass


class ThreadNotCommentableError(AccessDeniedError):
    """Raised when commenting on a thread that is closed for comments."""

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Thread '{thread_id}' is not commentable")
