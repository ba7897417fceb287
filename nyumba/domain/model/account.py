"""Account entity.

Accounts are owned by the registration/login system. This service only
reads them to check roles and whether an account is still active.
"""

from pydantic import Field

from nyumba.domain.model.common import DomainModel
from nyumba.domain.value import Role, UserId


class Account(DomainModel):
    """Read-only view of a platform account."""

    id: UserId
    role: Role
    name: str = Field(default="", max_length=255)
    active: bool = True

    @property
    def is_available_mentor(self) -> bool:
        """Whether students may send this account a mentorship request."""
        return self.active and self.role is Role.ALUMNI
