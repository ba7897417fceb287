"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy import Executable, Result
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from nyumba.domain.error import TransientStoreError


class PostgresRepository:
    """Base class holding the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable) -> Result[Any]:
        """Execute a statement, translating connectivity failures.

        Raises:
            TransientStoreError: If the database is unreachable or the
                connection dropped mid-statement
        """
        try:
            return await self.session.execute(stmt)
        except (OperationalError, InterfaceError) as e:
            logfire.error("Database unavailable", error=str(e))
            raise TransientStoreError("Database temporarily unavailable") from e
