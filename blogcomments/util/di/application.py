"""Application layer DI providers."""

from dishka import Scope, provide

from blogcomments.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListAdminCommentsUseCase,
    ListApprovedCommentsUseCase,
    ToggleCommentStatusUseCase,
    UpdateCommentUseCase,
)
from blogcomments.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from blogcomments.domain.service import CommentService
from blogcomments.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Public comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_approved_comments_use_case(
        self, comment_service: CommentService
    ) -> ListApprovedCommentsUseCase:
        """Provide list approved comments use case."""
        return ListApprovedCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_admin_comments_use_case(
        self, comment_service: CommentService
    ) -> ListAdminCommentsUseCase:
        """Provide admin comment listing use case."""
        return ListAdminCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_status_use_case(
        self, comment_service: CommentService
    ) -> ToggleCommentStatusUseCase:
        """Provide toggle comment status use case."""
        return ToggleCommentStatusUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(self, comment_service: CommentService) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, comment_service: CommentService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(comment_service=comment_service)
