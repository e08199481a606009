"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    ChangeCommentStateUseCase,
    CreateCommentUseCase,
    GetCommentUseCase,
    GetThreadCommentsUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.thread import (
    CreateThreadUseCase,
    GetThreadsUseCase,
    GetThreadUseCase,
    SetCommentableUseCase,
)
from discuss.application.usecase.vote import CastVoteUseCase, GetCommentScoreUseCase
from discuss.config import CommentSettings
from discuss.domain.service import CommentService, ThreadService, VoteService
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_threads_use_case(
        self, thread_service: ThreadService
    ) -> GetThreadsUseCase:
        """Provide get threads use case."""
        return GetThreadsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_set_commentable_use_case(
        self, thread_service: ThreadService
    ) -> SetCommentableUseCase:
        """Provide set commentable use case."""
        return SetCommentableUseCase(thread_service=thread_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_comments_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> GetThreadCommentsUseCase:
        """Provide get thread comments use case."""
        return GetThreadCommentsUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_change_comment_state_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> ChangeCommentStateUseCase:
        """Provide change comment state use case."""
        return ChangeCommentStateUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_score_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> GetCommentScoreUseCase:
        """Provide get comment score use case."""
        return GetCommentScoreUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            vote_service=vote_service,
        )
