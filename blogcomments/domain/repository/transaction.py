"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class TransactionManager(ABC):
    """Scoped transaction shared by the repositories of one request.

    Usage:
        async with transaction_manager.transaction():
            await reply_repository.delete_by_comment(comment_id)
            await comment_repository.delete(comment_id)

    Everything inside the block is committed together when it exits normally
    and rolled back when it raises.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Open a transaction scope."""
        pass
