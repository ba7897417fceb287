"""Unit tests for messaging use cases."""

import pytest

from nyumba.application.usecase.message import (
    CountUnreadRequest,
    CountUnreadUseCase,
    FetchNewMessagesRequest,
    FetchNewMessagesUseCase,
    ListConversationsRequest,
    ListConversationsUseCase,
    ListThreadRequest,
    ListThreadUseCase,
    SendMessageRequest,
    SendMessageUseCase,
)
from nyumba.domain.value import Role
from tests.harness import create_env_fixture, open_mentorship, seed_account

unit_env = create_env_fixture()


class TestMessagingUseCases:
    """Send, poll, read and summarize through the application layer."""

    @pytest.mark.asyncio
    async def test_polling_flow(self, unit_env):
        """Send, poll with the returned watermark, then poll again."""
        # Arrange
        send = await unit_env.get(SendMessageUseCase)
        fetch = await unit_env.get(FetchNewMessagesUseCase)
        count = await unit_env.get(CountUnreadUseCase)
        student = await seed_account(unit_env, 1, Role.STUDENT)
        alumni = await seed_account(unit_env, 2, Role.ALUMNI)
        mentorship = await open_mentorship(unit_env, student, alumni)

        # Act
        sent = await send.execute(
            SendMessageRequest(caller=student, mentorship_id=mentorship.id, text="Hi")
        )
        unread_before = await count.execute(CountUnreadRequest(caller=alumni))
        first_poll = await fetch.execute(
            FetchNewMessagesRequest(caller=alumni, mentorship_id=mentorship.id)
        )
        second_poll = await fetch.execute(
            FetchNewMessagesRequest(
                caller=alumni,
                mentorship_id=mentorship.id,
                since_id=first_poll.last_message_id,
            )
        )

        # Assert
        assert unread_before.unread_count == 1
        assert first_poll.has_new_messages is True
        assert [m.id for m in first_poll.messages] == [sent.message.id]
        assert first_poll.messages[0].is_read is True
        assert first_poll.total_unread == 0
        assert second_poll.has_new_messages is False
        assert second_poll.last_message_id == sent.message.id

    @pytest.mark.asyncio
    async def test_thread_and_conversations(self, unit_env):
        """The thread and the inbox agree on the latest message."""
        send = await unit_env.get(SendMessageUseCase)
        list_thread = await unit_env.get(ListThreadUseCase)
        list_conversations = await unit_env.get(ListConversationsUseCase)
        student = await seed_account(unit_env, 1, Role.STUDENT)
        alumni = await seed_account(unit_env, 2, Role.ALUMNI)
        mentorship = await open_mentorship(unit_env, student, alumni)
        await send.execute(
            SendMessageRequest(caller=alumni, mentorship_id=mentorship.id, text="Welcome")
        )

        inbox = await list_conversations.execute(ListConversationsRequest(caller=student))
        thread = await list_thread.execute(
            ListThreadRequest(caller=student, mentorship_id=mentorship.id)
        )

        assert inbox.conversations[0].last_message_text == "Welcome"
        assert inbox.conversations[0].unread_count == 1
        assert thread.mentorship_id == mentorship.id
        assert [m.text for m in thread.messages] == ["Welcome"]
        assert thread.messages[0].is_read is True
