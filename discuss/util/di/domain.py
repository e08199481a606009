"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from discuss.domain.service import (
    CommentService,
    CommentTreeBuilder,
    ThreadService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_comment_tree_builder(self) -> CommentTreeBuilder:
        """Provide the stateless comment tree builder."""
        return CommentTreeBuilder()

    @provide
    def get_thread_service(self, thread_repository: ThreadRepository) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
        tree_builder: CommentTreeBuilder,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
            tree_builder=tree_builder,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )
