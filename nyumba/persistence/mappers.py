"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from nyumba.domain.model import (
    Account,
    ConversationSummary,
    Mentorship,
    MentorshipRequest,
    MentorshipSummary,
    Message,
)
from nyumba.domain.value import (
    MentorshipId,
    MentorshipRequestId,
    MessageId,
    RequestStatus,
    Role,
    UserId,
)


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=UserId(row["id"]),
        role=Role(row["role"]),
        name=row.get("name") or "",
        active=row["active"],
    )


def row_to_mentorship_request(row: Dict[str, Any]) -> MentorshipRequest:
    """Convert database row to MentorshipRequest domain model."""
    return MentorshipRequest(
        id=MentorshipRequestId(row["id"]),
        student_id=UserId(row["student_id"]),
        alumni_id=UserId(row["alumni_id"]),
        message=row["message"],
        status=RequestStatus(row["status"]),
        requested_at=row["requested_at"],
        responded_at=row.get("responded_at"),
    )


def row_to_mentorship(row: Dict[str, Any]) -> Mentorship:
    """Convert database row to Mentorship domain model."""
    return Mentorship(
        id=MentorshipId(row["id"]),
        student_id=UserId(row["student_id"]),
        alumni_id=UserId(row["alumni_id"]),
        started_at=row["started_at"],
        active=row["active"],
    )


def row_to_mentorship_summary(row: Dict[str, Any]) -> MentorshipSummary:
    """Convert an aggregated listing row to MentorshipSummary.

    Expects the mentorship columns plus ``message_count`` and
    ``last_message_at``.
    """
    return MentorshipSummary(
        mentorship=row_to_mentorship(row),
        message_count=row.get("message_count") or 0,
        last_message_at=row.get("last_message_at"),
    )


def row_to_message(row: Dict[str, Any]) -> Message:
    """Convert database row to Message domain model."""
    return Message(
        id=MessageId(row["id"]),
        mentorship_id=MentorshipId(row["mentorship_id"]),
        sender_id=UserId(row["sender_id"]),
        receiver_id=UserId(row["receiver_id"]),
        text=row["text"],
        sent_at=row["sent_at"],
        is_read=row["is_read"],
    )


def row_to_conversation_summary(
    row: Dict[str, Any], user_id: UserId
) -> ConversationSummary:
    """Convert an inbox row to ConversationSummary from ``user_id``'s side."""
    partner_id = (
        row["alumni_id"] if row["student_id"] == user_id else row["student_id"]
    )
    last_sender_id = row.get("last_sender_id")
    return ConversationSummary(
        mentorship_id=MentorshipId(row["id"]),
        partner_id=UserId(partner_id),
        started_at=row["started_at"],
        unread_count=row.get("unread_count") or 0,
        last_message_text=row.get("last_message_text"),
        last_message_at=row.get("last_message_at"),
        last_sender_id=UserId(last_sender_id) if last_sender_id is not None else None,
    )
