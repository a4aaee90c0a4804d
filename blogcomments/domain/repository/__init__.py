"""Repository interfaces for blog comments.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blogcomments.domain.repository.comment import CommentRepository
from blogcomments.domain.repository.reply import ReplyRepository
from blogcomments.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentRepository",
    "ReplyRepository",
    "TransactionManager",
]
