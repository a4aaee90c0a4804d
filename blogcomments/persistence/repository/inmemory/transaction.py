"""In-memory transaction boundary for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from blogcomments.domain.repository import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Snapshot the store on entry and restore it if the block raises."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self._store.snapshot()
        try:
            yield
        except BaseException:
            self._store.restore(snapshot)
            raise
