"""PostgreSQL implementation of TransactionManager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from nyumba.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic units as savepoints inside the request transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
