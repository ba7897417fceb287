"""Account domain service."""

import logfire

from nyumba.domain.error import ValidationError
from nyumba.domain.model.account import Account
from nyumba.domain.repository import AccountRepository
from nyumba.domain.value import UserId

from .base import Service


class AccountService(Service):
    """Domain service for account lookups."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    async def get_account(self, user_id: UserId) -> Account | None:
        """Get account by ID.

        Args:
            user_id: Account ID

        Returns:
            Account if found, None otherwise
        """
        return await self.account_repository.find_by_id(user_id)

    async def require_available_mentor(self, alumni_id: UserId) -> Account:
        """Get an account that may receive mentorship requests.

        Args:
            alumni_id: Target account ID

        Returns:
            The active alumni account

        Raises:
            ValidationError: If the account is missing, inactive or not alumni
        """
        account = await self.account_repository.find_by_id(alumni_id)
        if account is None or not account.is_available_mentor:
            logfire.warn("Requested mentor unavailable", alumni_id=alumni_id)
            raise ValidationError("This alumni is not available for mentorship")
        return account
