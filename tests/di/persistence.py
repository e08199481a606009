"""Mock persistence providers for testing."""

from dishka import Scope, provide

from discuss.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from discuss.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
    InMemoryVoteRepository,
)
from discuss.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data survives across requests served by
    the same container (e2e tests issue several HTTP calls). Each test builds
    its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
