"""PostgreSQL repository implementations."""

from blogcomments.persistence.repository.comment import PostgresCommentRepository
from blogcomments.persistence.repository.reply import PostgresReplyRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresReplyRepository",
]
