"""In-memory account repository for testing."""

from typing import Optional

from nyumba.domain.model.account import Account
from nyumba.domain.repository.account import AccountRepository
from nyumba.domain.value import UserId

from .store import InMemoryStore


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[Account]:
        """Find an account by ID."""
        return self.store.accounts.get(user_id)

    def add(self, account: Account) -> Account:
        """Seed an account; accounts are created by the account service."""
        self.store.accounts[account.id] = account
        return account
