"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from nyumba.domain.model.account import Account
from nyumba.domain.value import UserId


class AccountRepository(ABC):
    """Read-only repository for accounts owned by the account service."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            user_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass
