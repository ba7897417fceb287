"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .mentorship import InMemoryMentorshipRepository
from .mentorship_request import InMemoryMentorshipRequestRepository
from .message import InMemoryMessageRepository
from .rate_limit import InMemoryRateLimitRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryMentorshipRepository",
    "InMemoryMentorshipRequestRepository",
    "InMemoryMessageRepository",
    "InMemoryRateLimitRepository",
    "InMemoryStore",
    "InMemoryTransactionManager",
]
