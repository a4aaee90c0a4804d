"""Domain layer DI providers."""

from dishka import Scope, provide

from blogcomments.config import ModerationSettings
from blogcomments.domain.repository import (
    CommentRepository,
    ReplyRepository,
    TransactionManager,
)
from blogcomments.domain.service import CommentService
from blogcomments.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        transaction_manager: TransactionManager,
        moderation_settings: ModerationSettings,
    ) -> CommentService:
        """Provide comment moderation domain service."""
        return CommentService(
            comment_repository=comment_repository,
            reply_repository=reply_repository,
            transaction_manager=transaction_manager,
            require_existing_comment_for_reply=(
                moderation_settings.require_existing_comment_for_reply
            ),
        )
