"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .items import AdminCommentItem, CommentItem, ReplyItem
from .list_admin import ListAdminCommentsUseCase
from .list_approved import ListApprovedCommentsRequest, ListApprovedCommentsUseCase
from .toggle_status import (
    ToggleCommentStatusRequest,
    ToggleCommentStatusResponse,
    ToggleCommentStatusUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "AdminCommentItem",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListAdminCommentsUseCase",
    "ListApprovedCommentsRequest",
    "ListApprovedCommentsUseCase",
    "ReplyItem",
    "ToggleCommentStatusRequest",
    "ToggleCommentStatusResponse",
    "ToggleCommentStatusUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
