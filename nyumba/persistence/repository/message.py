"""PostgreSQL implementation of Message repository."""

from datetime import datetime
from typing import List, Sequence

from sqlalchemy import and_, func, insert, or_, select, true, update

from nyumba.domain.model import ConversationSummary, Message
from nyumba.domain.repository import MessageRepository
from nyumba.domain.value import MentorshipId, MessageId, UserId
from nyumba.persistence.mappers import row_to_conversation_summary, row_to_message
from nyumba.persistence.repository.base import PostgresRepository
from nyumba.persistence.tables import mentorships_table, messages_table

messages = messages_table
mentorships = mentorships_table


class PostgresMessageRepository(PostgresRepository, MessageRepository):
    """PostgreSQL implementation of MessageRepository."""

    async def create(
        self,
        mentorship_id: MentorshipId,
        sender_id: UserId,
        receiver_id: UserId,
        text: str,
        sent_at: datetime,
    ) -> Message:
        """Append a message to a thread."""
        stmt = (
            insert(messages)
            .values(
                mentorship_id=mentorship_id,
                sender_id=sender_id,
                receiver_id=receiver_id,
                text=text,
                sent_at=sent_at,
                is_read=False,
            )
            .returning(messages)
        )
        result = await self._execute(stmt)
        return row_to_message(result.one()._asdict())

    async def find_thread(
        self, mentorship_id: MentorshipId, since_id: MessageId = MessageId(0)
    ) -> List[Message]:
        """Find messages in a thread, ordered by (sent_at, id)."""
        stmt = (
            select(messages)
            .where(
                and_(
                    messages.c.mentorship_id == mentorship_id,
                    messages.c.id > since_id,
                )
            )
            .order_by(messages.c.sent_at.asc(), messages.c.id.asc())
        )
        result = await self._execute(stmt)
        return [row_to_message(row._asdict()) for row in result.fetchall()]

    async def mark_thread_read(
        self, mentorship_id: MentorshipId, receiver_id: UserId
    ) -> int:
        """Mark every unread message addressed to a user in a thread as read."""
        stmt = (
            update(messages)
            .where(
                and_(
                    messages.c.mentorship_id == mentorship_id,
                    messages.c.receiver_id == receiver_id,
                    messages.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self._execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def mark_read(
        self, message_ids: Sequence[MessageId], receiver_id: UserId
    ) -> int:
        """Mark specific messages as read, restricted to the given receiver."""
        if not message_ids:
            return 0

        stmt = (
            update(messages)
            .where(
                and_(
                    messages.c.id.in_(message_ids),
                    messages.c.receiver_id == receiver_id,
                    messages.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self._execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]

    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages for a user across active mentorships."""
        stmt = (
            select(func.count(messages.c.id))
            .select_from(
                messages.join(mentorships, mentorships.c.id == messages.c.mentorship_id)
            )
            .where(
                and_(
                    messages.c.receiver_id == receiver_id,
                    messages.c.is_read.is_(False),
                    mentorships.c.active.is_(True),
                )
            )
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def list_conversations(self, user_id: UserId) -> List[ConversationSummary]:
        """Summarize the user's active threads, most recent activity first."""
        last_message = (
            select(messages.c.text, messages.c.sent_at, messages.c.sender_id)
            .where(messages.c.mentorship_id == mentorships.c.id)
            .order_by(messages.c.sent_at.desc(), messages.c.id.desc())
            .limit(1)
            .lateral("last_message")
        )
        unread_count = (
            select(func.count(messages.c.id))
            .where(
                and_(
                    messages.c.mentorship_id == mentorships.c.id,
                    messages.c.receiver_id == user_id,
                    messages.c.is_read.is_(False),
                )
            )
            .scalar_subquery()
        )

        stmt = (
            select(
                mentorships,
                unread_count.label("unread_count"),
                last_message.c.text.label("last_message_text"),
                last_message.c.sent_at.label("last_message_at"),
                last_message.c.sender_id.label("last_sender_id"),
            )
            .select_from(mentorships.outerjoin(last_message, true()))
            .where(
                and_(
                    mentorships.c.active.is_(True),
                    or_(
                        mentorships.c.student_id == user_id,
                        mentorships.c.alumni_id == user_id,
                    ),
                )
            )
            .order_by(
                func.coalesce(last_message.c.sent_at, mentorships.c.started_at).desc(),
                mentorships.c.id.desc(),
            )
        )
        result = await self._execute(stmt)
        return [
            row_to_conversation_summary(row._asdict(), user_id)
            for row in result.fetchall()
        ]
