"""Domain value objects for Nyumba Connect."""

from nyumba.domain.value.identifiers import (
    MentorshipId,
    MentorshipRequestId,
    MessageId,
    UserId,
)
from nyumba.domain.value.text import sanitize_text
from nyumba.domain.value.types import (
    Caller,
    MentorshipStatusFilter,
    RateLimitAction,
    RateLimitKey,
    RequestStatus,
    ResponseDecision,
    Role,
)

__all__ = [
    # Identifiers
    "UserId",
    "MentorshipRequestId",
    "MentorshipId",
    "MessageId",
    # Types
    "Caller",
    "MentorshipStatusFilter",
    "RateLimitAction",
    "RateLimitKey",
    "RequestStatus",
    "ResponseDecision",
    "Role",
    # Text
    "sanitize_text",
]
