"""Domain model entities for Nyumba Connect."""

from nyumba.domain.model.account import Account
from nyumba.domain.model.mentorship import (
    Mentorship,
    MentorshipSummary,
    resolve_participants,
)
from nyumba.domain.model.mentorship_request import MentorshipRequest
from nyumba.domain.model.message import ConversationSummary, Message, ThreadUpdate

__all__ = [
    "Account",
    "ConversationSummary",
    "Mentorship",
    "MentorshipRequest",
    "MentorshipSummary",
    "Message",
    "ThreadUpdate",
    "resolve_participants",
]
