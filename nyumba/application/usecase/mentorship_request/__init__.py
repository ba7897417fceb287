"""Mentorship request use cases."""

from .common import MentorshipRequestItem
from .create_request import (
    CreateMentorshipRequestRequest,
    CreateMentorshipRequestResponse,
    CreateMentorshipRequestUseCase,
)
from .get_request import (
    GetMentorshipRequestRequest,
    GetMentorshipRequestResponse,
    GetMentorshipRequestUseCase,
)
from .list_requests import (
    ListMentorshipRequestsRequest,
    ListMentorshipRequestsResponse,
    ListMentorshipRequestsUseCase,
)
from .respond_to_request import (
    RespondToRequestRequest,
    RespondToRequestResponse,
    RespondToRequestUseCase,
)

__all__ = [
    "MentorshipRequestItem",
    "CreateMentorshipRequestRequest",
    "CreateMentorshipRequestResponse",
    "CreateMentorshipRequestUseCase",
    "GetMentorshipRequestRequest",
    "GetMentorshipRequestResponse",
    "GetMentorshipRequestUseCase",
    "ListMentorshipRequestsRequest",
    "ListMentorshipRequestsResponse",
    "ListMentorshipRequestsUseCase",
    "RespondToRequestRequest",
    "RespondToRequestResponse",
    "RespondToRequestUseCase",
]
