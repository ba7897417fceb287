"""Message domain service."""

from datetime import datetime, timezone

import logfire

from nyumba.config import MessagingSettings
from nyumba.domain.error import NotAuthorizedError, ValidationError
from nyumba.domain.model.message import ConversationSummary, Message, ThreadUpdate
from nyumba.domain.repository import MessageRepository
from nyumba.domain.value import (
    Caller,
    MentorshipId,
    MessageId,
    RateLimitAction,
    UserId,
    sanitize_text,
)

from .base import Service
from .mentorship_service import MentorshipService
from .rate_limit_service import RateLimitService


class MessageService(Service):
    """Domain service for mentorship threads and polling delivery."""

    def __init__(
        self,
        message_repository: MessageRepository,
        mentorship_service: MentorshipService,
        rate_limit_service: RateLimitService,
        messaging_settings: MessagingSettings,
    ) -> None:
        """Initialize message service.

        Args:
            message_repository: Message repository
            mentorship_service: Mentorship domain service
            rate_limit_service: Rate limit domain service
            messaging_settings: Length and rate limits
        """
        self.message_repository = message_repository
        self.mentorship_service = mentorship_service
        self.rate_limit_service = rate_limit_service
        self.settings = messaging_settings

    async def send_message(
        self, caller: Caller, mentorship_id: MentorshipId, text: str
    ) -> Message:
        """Append a message to a thread.

        The receiver is always the other member of the mentorship.

        Args:
            caller: Sender
            mentorship_id: Thread to post into
            text: Raw message text

        Returns:
            The stored message

        Raises:
            ValidationError: If the text is empty or too long after cleaning
            NotFoundError: If the caller is not a member
            NotAuthorizedError: If the mentorship is inactive
            RateLimitedError: If the sender exceeded the send rate
        """
        with logfire.span(
            "message_service.send_message",
            mentorship_id=mentorship_id,
            sender_id=caller.id,
        ):
            clean = sanitize_text(text)
            if not clean:
                raise ValidationError("Message cannot be empty")
            if len(clean) > self.settings.message_max_length:
                raise ValidationError(
                    f"Message cannot exceed {self.settings.message_max_length} characters"
                )

            mentorship, sender_id, receiver_id = (
                await self.mentorship_service.get_for_participant(
                    mentorship_id, caller.id
                )
            )
            if not mentorship.active:
                logfire.warn(
                    "Send to inactive mentorship",
                    mentorship_id=mentorship_id,
                    sender_id=sender_id,
                )
                raise NotAuthorizedError("This mentorship is no longer active")

            await self.rate_limit_service.hit(
                RateLimitAction.SEND_MESSAGE,
                sender_id,
                self.settings.send_rate_limit,
                self.settings.send_rate_window_seconds,
            )

            message = await self.message_repository.create(
                mentorship_id=mentorship_id,
                sender_id=sender_id,
                receiver_id=receiver_id,
                text=clean,
                sent_at=datetime.now(timezone.utc),
            )

            logfire.info(
                "Message sent",
                message_id=message.id,
                mentorship_id=mentorship_id,
                sender_id=sender_id,
                receiver_id=receiver_id,
            )
            return message

    async def list_thread(
        self, caller: Caller, mentorship_id: MentorshipId
    ) -> list[Message]:
        """Return the full thread after marking the caller's inbound messages read.

        Inactive mentorships stay readable by their members.

        Raises:
            NotFoundError: If the caller is not a member
        """
        with logfire.span(
            "message_service.list_thread",
            mentorship_id=mentorship_id,
            user_id=caller.id,
        ):
            await self.mentorship_service.get_for_participant(mentorship_id, caller.id)

            marked = await self.message_repository.mark_thread_read(
                mentorship_id, caller.id
            )
            if marked:
                logfire.info(
                    "Messages marked read",
                    mentorship_id=mentorship_id,
                    user_id=caller.id,
                    count=marked,
                )

            return await self.message_repository.find_thread(mentorship_id)

    async def fetch_new(
        self, caller: Caller, mentorship_id: MentorshipId, since_id: MessageId
    ) -> ThreadUpdate:
        """Poll a thread for messages newer than a watermark.

        Only returned messages addressed to the caller are marked read, and
        they are returned in their post-mark state. Calling again with the
        same ``since_id`` returns the same messages.

        Args:
            caller: Polling member
            mentorship_id: Thread to poll
            since_id: Last message ID the client already has

        Returns:
            New messages, the caller's total unread count and the new watermark

        Raises:
            ValidationError: If since_id is negative
            NotFoundError: If the caller is not a member
        """
        if since_id < 0:
            raise ValidationError("since_id must be zero or positive")

        with logfire.span(
            "message_service.fetch_new",
            mentorship_id=mentorship_id,
            user_id=caller.id,
            since_id=since_id,
        ):
            await self.mentorship_service.get_for_participant(mentorship_id, caller.id)

            messages = await self.message_repository.find_thread(
                mentorship_id, since_id
            )

            to_mark = [
                m.id for m in messages if m.receiver_id == caller.id and not m.is_read
            ]
            if to_mark:
                await self.message_repository.mark_read(to_mark, caller.id)
                marked = set(to_mark)
                messages = [
                    m.model_copy(update={"is_read": True}) if m.id in marked else m
                    for m in messages
                ]

            total_unread = await self.message_repository.count_unread(caller.id)
            last_message_id = max((m.id for m in messages), default=since_id)

            return ThreadUpdate(
                messages=messages,
                total_unread=total_unread,
                last_message_id=MessageId(last_message_id),
            )

    async def count_unread(self, user_id: UserId) -> int:
        """Count the user's unread messages across active mentorships."""
        with logfire.span("message_service.count_unread", user_id=user_id):
            return await self.message_repository.count_unread(user_id)

    async def list_conversations(self, caller: Caller) -> list[ConversationSummary]:
        """Summarize the caller's active threads, most recent activity first."""
        with logfire.span("message_service.list_conversations", user_id=caller.id):
            return await self.message_repository.list_conversations(caller.id)
