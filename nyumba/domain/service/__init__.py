"""Domain services."""

from .account_service import AccountService
from .base import Service
from .jwt_service import JWTService
from .mentorship_request_service import MentorshipRequestService
from .mentorship_service import MentorshipService
from .message_service import MessageService
from .rate_limit_service import RateLimitService

__all__ = [
    "AccountService",
    "JWTService",
    "MentorshipRequestService",
    "MentorshipService",
    "MessageService",
    "RateLimitService",
    "Service",
]
