"""Get thread comments use case."""

from pydantic import BaseModel

from discuss.application.usecase.thread.common import ThreadItem
from discuss.config import CommentSettings
from discuss.domain.service import CommentService, ThreadService
from discuss.domain.service.comment_tree import count_nodes
from discuss.domain.value import CommentSorter, CommentView, ThreadId

from .common import CommentNodeItem


class GetThreadCommentsRequest(BaseModel):
    """Get thread comments request."""

    thread_id: str
    permalink: str | None = None  # Used when the thread is created on first view
    view: CommentView = CommentView.TREE
    sorter: CommentSorter | None = None
    display_depth: int | None = None  # None for the configured default, 0 for all


class GetThreadCommentsResponse(BaseModel):
    """Get thread comments response."""

    thread: ThreadItem
    view: CommentView
    sorter: CommentSorter
    display_depth: int | None
    comments: list[CommentNodeItem]
    total: int


class GetThreadCommentsUseCase:
    """Use case for listing the comments of a thread.

    The thread is created on first view, so embedding pages never need to
    register their thread up front.
    """

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get thread comments use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            comment_settings: Default sorter and display depth
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetThreadCommentsRequest
    ) -> GetThreadCommentsResponse:
        """Execute get thread comments flow.

        Steps:
        1. Get or create the thread
        2. Fetch comments sorted by the store and cut to the display depth
        3. Nest them (tree view) or keep them as a flat list (flat view)

        Args:
            request: Get thread comments request

        Returns:
            The thread and its comments, roots first in sorter order
        """
        sorter = request.sorter or self.comment_settings.default_sorter
        display_depth = (
            request.display_depth
            if request.display_depth is not None
            else self.comment_settings.default_display_depth
        )

        thread = await self.thread_service.get_or_create_thread(
            ThreadId(request.thread_id), request.permalink
        )

        if request.view == CommentView.FLAT:
            nodes = await self.comment_service.get_flat_comments(
                thread, sorter=sorter, max_depth=display_depth
            )
        else:
            nodes = await self.comment_service.get_comment_tree(
                thread, sorter=sorter, max_depth=display_depth
            )

        return GetThreadCommentsResponse(
            thread=ThreadItem.from_thread(thread),
            view=request.view,
            sorter=sorter,
            display_depth=display_depth,
            comments=[CommentNodeItem.from_node(node) for node in nodes],
            total=count_nodes(nodes),
        )
