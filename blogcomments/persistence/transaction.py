"""PostgreSQL implementation of the transaction boundary."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from blogcomments.domain.repository import TransactionManager
from blogcomments.persistence.database import storage_errors


class PostgresTransactionManager(TransactionManager):
    """Transaction scope backed by a SAVEPOINT on the request session.

    The request session commits once at the end of the request; the savepoint
    makes the block all-or-nothing even when the request goes on afterwards.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block inside a nested transaction."""
        with storage_errors("transaction"):
            async with self.session.begin_nested():
                yield
