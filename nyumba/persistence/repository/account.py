"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select

from nyumba.domain.model import Account
from nyumba.domain.repository import AccountRepository
from nyumba.domain.value import UserId
from nyumba.persistence.mappers import row_to_account
from nyumba.persistence.repository.base import PostgresRepository
from nyumba.persistence.tables import accounts_table


class PostgresAccountRepository(PostgresRepository, AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[Account]:
        """Find an account by ID."""
        stmt = select(accounts_table).where(accounts_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None
