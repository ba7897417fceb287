"""Shared response item for message use cases."""

from datetime import datetime

from pydantic import BaseModel

from nyumba.domain.model import Message


class MessageItem(BaseModel):
    """A message as returned to clients."""

    id: int
    mentorship_id: int
    sender_id: int
    receiver_id: int
    text: str
    sent_at: datetime
    is_read: bool

    @classmethod
    def from_domain(cls, message: Message) -> "MessageItem":
        return cls(
            id=message.id,
            mentorship_id=message.mentorship_id,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            text=message.text,
            sent_at=message.sent_at,
            is_read=message.is_read,
        )
