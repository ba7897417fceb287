"""Message repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Sequence

from nyumba.domain.model.message import ConversationSummary, Message
from nyumba.domain.value import MentorshipId, MessageId, UserId


class MessageRepository(ABC):
    """Repository for Message entity.

    Messages are append-only. The only update is marking messages read.
    """

    @abstractmethod
    async def create(
        self,
        mentorship_id: MentorshipId,
        sender_id: UserId,
        receiver_id: UserId,
        text: str,
        sent_at: datetime,
    ) -> Message:
        """Append a message to a thread.

        Args:
            mentorship_id: The owning mentorship
            sender_id: The author
            receiver_id: The other member
            text: Sanitized message text
            sent_at: Send time

        Returns:
            The stored message with its assigned ID
        """
        pass

    @abstractmethod
    async def find_thread(
        self, mentorship_id: MentorshipId, since_id: MessageId = MessageId(0)
    ) -> List[Message]:
        """Find messages in a thread, ordered by (sent_at, id).

        Args:
            mentorship_id: The thread's mentorship
            since_id: Only messages with a greater ID are returned

        Returns:
            List of messages
        """
        pass

    @abstractmethod
    async def mark_thread_read(
        self, mentorship_id: MentorshipId, receiver_id: UserId
    ) -> int:
        """Mark every unread message addressed to a user in a thread as read.

        Args:
            mentorship_id: The thread's mentorship
            receiver_id: The reader

        Returns:
            Number of messages updated
        """
        pass

    @abstractmethod
    async def mark_read(
        self, message_ids: Sequence[MessageId], receiver_id: UserId
    ) -> int:
        """Mark specific messages as read, restricted to the given receiver.

        Args:
            message_ids: Candidate message IDs
            receiver_id: Only messages addressed to this user are touched

        Returns:
            Number of messages updated
        """
        pass

    @abstractmethod
    async def count_unread(self, receiver_id: UserId) -> int:
        """Count unread messages for a user across active mentorships.

        Args:
            receiver_id: The reader

        Returns:
            Unread message count
        """
        pass

    @abstractmethod
    async def list_conversations(self, user_id: UserId) -> List[ConversationSummary]:
        """Summarize the user's active threads, most recent activity first.

        Args:
            user_id: The member

        Returns:
            List of conversation summaries
        """
        pass
