"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from nyumba.domain.repository import TransactionManager

from .store import InMemoryStore


class InMemoryTransactionManager(TransactionManager):
    """Restores the store to its prior state when the unit fails."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshot = self.store.snapshot()
        try:
            yield
        except BaseException:
            self.store.restore(snapshot)
            raise
