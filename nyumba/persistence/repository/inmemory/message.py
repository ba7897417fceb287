"""In-memory message repository for testing."""

from datetime import datetime
from typing import Sequence

from nyumba.domain.model.message import ConversationSummary, Message
from nyumba.domain.repository.message import MessageRepository
from nyumba.domain.value import MentorshipId, MessageId, UserId

from .store import InMemoryStore


class InMemoryMessageRepository(MessageRepository):
    """In-memory implementation of MessageRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def create(
        self,
        mentorship_id: MentorshipId,
        sender_id: UserId,
        receiver_id: UserId,
        text: str,
        sent_at: datetime,
    ) -> Message:
        """Append a message to a thread."""
        message = Message(
            id=MessageId(self.store.next_id("messages")),
            mentorship_id=mentorship_id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            text=text,
            sent_at=sent_at,
            is_read=False,
        )
        self.store.messages[message.id] = message
        return message

    async def find_thread(
        self, mentorship_id: MentorshipId, since_id: MessageId = MessageId(0)
    ) -> list[Message]:
        """Find messages in a thread, ordered by (sent_at, id)."""
        thread = [
            m
            for m in self.store.messages.values()
            if m.mentorship_id == mentorship_id and m.id > since_id
        ]
        return sorted(thread, key=lambda m: m.sort_key)

    async def mark_thread_read(
        self, mentorship_id: MentorshipId, receiver_id: UserId
    ) -> int:
        """Mark every unread message addressed to a user in a thread as read."""
        ids = [
            m.id
            for m in self.store.messages.values()
            if m.mentorship_id == mentorship_id
        ]
        return await self.mark_read(ids, receiver_id)

    async def mark_read(
        self, message_ids: Sequence[MessageId], receiver_id: UserId
    ) -> int:
        """Mark specific messages as read, restricted to the given receiver."""
        updated = 0
        for message_id in message_ids:
            message = self.store.messages.get(message_id)
            if message and message.receiver_id == receiver_id and not message.is_read:
                self.store.messages[message_id] = message.model_copy(
                    update={"is_read": True}
                )
                updated += 1
        return updated

    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages for a user across active mentorships."""
        count = 0
        for message in self.store.messages.values():
            mentorship = self.store.mentorships.get(message.mentorship_id)
            if (
                message.receiver_id == receiver_id
                and not message.is_read
                and mentorship is not None
                and mentorship.active
            ):
                count += 1
        return count

    async def list_conversations(self, user_id: UserId) -> list[ConversationSummary]:
        """Summarize the user's active threads, most recent activity first."""
        summaries = []
        for mentorship in self.store.mentorships.values():
            if not (mentorship.active and mentorship.has_member(user_id)):
                continue

            thread = await self.find_thread(mentorship.id)
            last = thread[-1] if thread else None
            partner_id = (
                mentorship.alumni_id
                if mentorship.student_id == user_id
                else mentorship.student_id
            )
            summaries.append(
                ConversationSummary(
                    mentorship_id=mentorship.id,
                    partner_id=partner_id,
                    started_at=mentorship.started_at,
                    unread_count=sum(
                        1 for m in thread if m.receiver_id == user_id and not m.is_read
                    ),
                    last_message_text=last.text if last else None,
                    last_message_at=last.sent_at if last else None,
                    last_sender_id=last.sender_id if last else None,
                )
            )

        return sorted(
            summaries,
            key=lambda s: (s.last_activity_at, s.mentorship_id),
            reverse=True,
        )
