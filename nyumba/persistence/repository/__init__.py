"""PostgreSQL repository implementations."""

from nyumba.persistence.repository.account import PostgresAccountRepository
from nyumba.persistence.repository.mentorship import PostgresMentorshipRepository
from nyumba.persistence.repository.mentorship_request import (
    PostgresMentorshipRequestRepository,
)
from nyumba.persistence.repository.message import PostgresMessageRepository
from nyumba.persistence.repository.rate_limit import PostgresRateLimitRepository
from nyumba.persistence.repository.transaction import PostgresTransactionManager

__all__ = [
    "PostgresAccountRepository",
    "PostgresMentorshipRepository",
    "PostgresMentorshipRequestRepository",
    "PostgresMessageRepository",
    "PostgresRateLimitRepository",
    "PostgresTransactionManager",
]
