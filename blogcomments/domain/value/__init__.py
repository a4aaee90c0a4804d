"""Domain value objects for blog comments."""

from blogcomments.domain.value.identifiers import BlogId, CommentId, ReplyId
from blogcomments.domain.value.types import CommentStatus

__all__ = [
    # Identifiers
    "BlogId",
    "CommentId",
    "ReplyId",
    # Types
    "CommentStatus",
]
