"""Message entity.

Messages form an append-only log scoped to one mentorship. The only
mutation ever applied is flipping ``is_read`` from false to true.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from nyumba.domain.model.common import DomainModel
from nyumba.domain.value import MentorshipId, MessageId, UserId


class Message(DomainModel):
    """A single message in a mentorship thread."""

    id: MessageId
    mentorship_id: MentorshipId
    sender_id: UserId
    receiver_id: UserId
    text: str = Field(min_length=1)
    sent_at: datetime
    is_read: bool = False

    @model_validator(mode="after")
    def validate_distinct_parties(self) -> "Message":
        """A message is never addressed to its own sender."""
        if self.sender_id == self.receiver_id:
            raise ValueError("Sender and receiver must be different users")
        return self

    @property
    def sort_key(self) -> tuple[datetime, int]:
        """Total thread order: send time, then id for same-instant sends."""
        return self.sent_at, self.id


class ConversationSummary(DomainModel):
    """One row of a user's inbox."""

    mentorship_id: MentorshipId
    partner_id: UserId
    started_at: datetime
    unread_count: int = 0
    last_message_text: Optional[str] = None
    last_message_at: Optional[datetime] = None
    last_sender_id: Optional[UserId] = None

    @property
    def last_activity_at(self) -> datetime:
        return self.last_message_at or self.started_at


class ThreadUpdate(DomainModel):
    """Result of one poll for new messages in a thread."""

    messages: list[Message]
    total_unread: int
    last_message_id: MessageId

    @property
    def has_new_messages(self) -> bool:
        return bool(self.messages)
