"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .reply import InMemoryReplyRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReplyRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
]
