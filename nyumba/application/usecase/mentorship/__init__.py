"""Mentorship use cases."""

from .common import MentorshipItem
from .list_mentorships import (
    ListMentorshipsRequest,
    ListMentorshipsResponse,
    ListMentorshipsUseCase,
    MentorshipListItem,
)
from .set_active import (
    SetMentorshipActiveRequest,
    SetMentorshipActiveResponse,
    SetMentorshipActiveUseCase,
)

__all__ = [
    "MentorshipItem",
    "MentorshipListItem",
    "ListMentorshipsRequest",
    "ListMentorshipsResponse",
    "ListMentorshipsUseCase",
    "SetMentorshipActiveRequest",
    "SetMentorshipActiveResponse",
    "SetMentorshipActiveUseCase",
]
