"""List comments for moderation use case."""

from blogcomments.domain.service import CommentService

from ..base import BaseUseCase
from .items import AdminCommentItem


class ListAdminCommentsUseCase(BaseUseCase):
    """Use case for the moderation overview of every comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: None = None) -> list[AdminCommentItem]:
        """Return all comments, newest first, with blog titles and replies."""
        threads = await self.comment_service.list_all_for_admin()
        return [AdminCommentItem.from_admin_thread(thread) for thread in threads]
