"""Domain services."""

from .base import Service
from .comment_service import CommentService

__all__ = [
    "CommentService",
    "Service",
]
