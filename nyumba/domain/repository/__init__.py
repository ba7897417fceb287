"""Repository interfaces for Nyumba Connect domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from nyumba.domain.repository.account import AccountRepository
from nyumba.domain.repository.mentorship import MentorshipRepository
from nyumba.domain.repository.mentorship_request import MentorshipRequestRepository
from nyumba.domain.repository.message import MessageRepository
from nyumba.domain.repository.rate_limit import RateLimitRepository
from nyumba.domain.repository.transaction import TransactionManager

__all__ = [
    "AccountRepository",
    "MentorshipRepository",
    "MentorshipRequestRepository",
    "MessageRepository",
    "RateLimitRepository",
    "TransactionManager",
]
