"""Unit tests for MessageService."""

import pytest

from nyumba.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from nyumba.domain.service import MentorshipService, MessageService
from nyumba.domain.value import MentorshipId, MessageId, Role
from tests.harness import create_env_fixture, open_mentorship, seed_account

unit_env = create_env_fixture()


async def _pair(env, student_id: int = 1, alumni_id: int = 2):
    student = await seed_account(env, student_id, Role.STUDENT)
    alumni = await seed_account(env, alumni_id, Role.ALUMNI)
    mentorship = await open_mentorship(env, student, alumni)
    return student, alumni, mentorship


class TestSendMessage:
    """Tests for send_message."""

    @pytest.mark.asyncio
    async def test_receiver_is_the_other_member(self, unit_env):
        """Both directions address the counterpart, never the sender."""
        # Arrange
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)

        # Act
        first = await service.send_message(student, mentorship.id, "Hello!")
        reply = await service.send_message(alumni, mentorship.id, "Hi there")

        # Assert
        assert (first.sender_id, first.receiver_id) == (student.id, alumni.id)
        assert (reply.sender_id, reply.receiver_id) == (alumni.id, student.id)
        assert first.is_read is False
        assert reply.id > first.id

    @pytest.mark.asyncio
    async def test_text_is_cleaned(self, unit_env):
        """Control characters and outer whitespace are removed."""
        service = await unit_env.get(MessageService)
        student, _, mentorship = await _pair(unit_env)

        message = await service.send_message(
            student, mentorship.id, "  line one\r\nline\x00 two\t \x1b "
        )

        assert message.text == "line one\r\nline two"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   \n\t", "\x00\x01", "x" * 2001])
    async def test_invalid_text_is_rejected(self, unit_env, text):
        """Empty-after-cleaning or over-long text is a validation error."""
        service = await unit_env.get(MessageService)
        student, _, mentorship = await _pair(unit_env)

        with pytest.raises(ValidationError):
            await service.send_message(student, mentorship.id, text)

    @pytest.mark.asyncio
    async def test_max_length_is_accepted(self, unit_env):
        """Exactly 2000 characters is allowed."""
        service = await unit_env.get(MessageService)
        student, _, mentorship = await _pair(unit_env)

        message = await service.send_message(student, mentorship.id, "x" * 2000)

        assert len(message.text) == 2000

    @pytest.mark.asyncio
    async def test_raised_length_limit_is_honored(self, unit_env):
        """A longer configured maximum accepts text past the default."""
        service = await unit_env.get(MessageService)
        service.settings = service.settings.model_copy(
            update={"message_max_length": 3000}
        )
        student, _, mentorship = await _pair(unit_env)

        message = await service.send_message(student, mentorship.id, "x" * 2500)

        assert len(message.text) == 2500
        with pytest.raises(ValidationError):
            await service.send_message(student, mentorship.id, "x" * 3001)

    @pytest.mark.asyncio
    async def test_outsider_gets_not_found(self, unit_env):
        """Non-members cannot post and cannot learn the thread exists."""
        service = await unit_env.get(MessageService)
        _, _, mentorship = await _pair(unit_env)
        outsider = await seed_account(unit_env, 3, Role.STUDENT)

        with pytest.raises(NotFoundError):
            await service.send_message(outsider, mentorship.id, "Hello?")
        with pytest.raises(NotFoundError):
            await service.send_message(outsider, MentorshipId(404), "Hello?")

    @pytest.mark.asyncio
    async def test_inactive_mentorship_refuses_new_messages(self, unit_env, admin):
        """Deactivation stops sending but keeps the history."""
        service = await unit_env.get(MessageService)
        mentorship_service = await unit_env.get(MentorshipService)
        student, alumni, mentorship = await _pair(unit_env)
        await service.send_message(student, mentorship.id, "Before")
        await mentorship_service.set_active(admin, mentorship.id, False)

        with pytest.raises(NotAuthorizedError):
            await service.send_message(alumni, mentorship.id, "After")

        thread = await service.list_thread(student, mentorship.id)
        assert [m.text for m in thread] == ["Before"]

    @pytest.mark.asyncio
    async def test_eleventh_message_in_a_minute_is_rate_limited(self, unit_env):
        """Ten sends per sender per minute, across all threads."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)

        for i in range(10):
            await service.send_message(student, mentorship.id, f"message {i}")

        with pytest.raises(RateLimitedError):
            await service.send_message(student, mentorship.id, "one too many")

        # The other member has their own budget
        reply = await service.send_message(alumni, mentorship.id, "slow down")
        assert reply.sender_id == alumni.id

        thread = await service.list_thread(alumni, mentorship.id)
        assert len(thread) == 11


class TestListThread:
    """Tests for list_thread."""

    @pytest.mark.asyncio
    async def test_ordered_and_marks_only_inbound_read(self, unit_env):
        """The caller's own sent messages keep their read flag."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        sent = [
            await service.send_message(student, mentorship.id, "one"),
            await service.send_message(alumni, mentorship.id, "two"),
            await service.send_message(student, mentorship.id, "three"),
        ]

        thread = await service.list_thread(alumni, mentorship.id)

        assert [m.id for m in thread] == [m.id for m in sent]
        read_flags = {m.text: m.is_read for m in thread}
        assert read_flags == {"one": True, "two": False, "three": True}
        assert await service.count_unread(alumni.id) == 0
        assert await service.count_unread(student.id) == 1

    @pytest.mark.asyncio
    async def test_repeated_reads_return_same_thread(self, unit_env):
        """Reading again changes nothing."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        await service.send_message(student, mentorship.id, "Hello!")

        first = await service.list_thread(alumni, mentorship.id)
        second = await service.list_thread(alumni, mentorship.id)

        assert first == second

    @pytest.mark.asyncio
    async def test_outsider_gets_not_found(self, unit_env):
        """Non-members cannot read a thread."""
        service = await unit_env.get(MessageService)
        _, _, mentorship = await _pair(unit_env)
        outsider = await seed_account(unit_env, 3, Role.ALUMNI)

        with pytest.raises(NotFoundError):
            await service.list_thread(outsider, mentorship.id)


class TestFetchNew:
    """Tests for fetch_new."""

    @pytest.mark.asyncio
    async def test_poll_returns_newer_messages_and_marks_them(self, unit_env):
        """A poll delivers unseen messages already marked read."""
        # Arrange
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        greeting = await service.send_message(student, mentorship.id, "Hello!")
        await service.list_thread(alumni, mentorship.id)
        followup = await service.send_message(student, mentorship.id, "Are you there?")

        # Act
        update = await service.fetch_new(alumni, mentorship.id, greeting.id)

        # Assert
        assert [m.id for m in update.messages] == [followup.id]
        assert update.messages[0].is_read is True
        assert update.total_unread == 0
        assert update.last_message_id == followup.id
        assert update.has_new_messages is True

    @pytest.mark.asyncio
    async def test_same_watermark_is_idempotent(self, unit_env):
        """Polling twice with one since_id returns the same messages."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        await service.send_message(student, mentorship.id, "Hello!")

        first = await service.fetch_new(alumni, mentorship.id, MessageId(0))
        second = await service.fetch_new(alumni, mentorship.id, MessageId(0))

        assert first.messages == second.messages
        assert first.last_message_id == second.last_message_id

    @pytest.mark.asyncio
    async def test_empty_poll_keeps_watermark(self, unit_env):
        """Nothing new returns since_id as the watermark."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        message = await service.send_message(student, mentorship.id, "Hello!")

        update = await service.fetch_new(alumni, mentorship.id, message.id)

        assert update.messages == []
        assert update.has_new_messages is False
        assert update.last_message_id == message.id

    @pytest.mark.asyncio
    async def test_own_messages_are_not_marked(self, unit_env):
        """The sender polling their own message leaves it unread for the receiver."""
        service = await unit_env.get(MessageService)
        student, alumni, mentorship = await _pair(unit_env)
        await service.send_message(student, mentorship.id, "Hello!")

        update = await service.fetch_new(student, mentorship.id, MessageId(0))

        assert update.messages[0].is_read is False
        assert await service.count_unread(alumni.id) == 1

    @pytest.mark.asyncio
    async def test_total_unread_spans_all_threads(self, unit_env):
        """total_unread counts the caller's inbox, not just this thread."""
        service = await unit_env.get(MessageService)
        student, alumni_a, first = await _pair(unit_env, 1, 2)
        alumni_b = await seed_account(unit_env, 3, Role.ALUMNI)
        second = await open_mentorship(unit_env, student, alumni_b)
        await service.send_message(alumni_a, first.id, "from a")
        await service.send_message(alumni_b, second.id, "from b")

        update = await service.fetch_new(student, first.id, MessageId(0))

        assert update.total_unread == 1

    @pytest.mark.asyncio
    async def test_negative_watermark_is_rejected(self, unit_env):
        """since_id must be zero or positive."""
        service = await unit_env.get(MessageService)
        student, _, mentorship = await _pair(unit_env)

        with pytest.raises(ValidationError):
            await service.fetch_new(student, mentorship.id, MessageId(-1))


class TestUnreadAndConversations:
    """Tests for count_unread and list_conversations."""

    @pytest.mark.asyncio
    async def test_unread_excludes_inactive_mentorships(self, unit_env, admin):
        """Deactivated threads drop out of the unread count."""
        service = await unit_env.get(MessageService)
        mentorship_service = await unit_env.get(MentorshipService)
        student, alumni, mentorship = await _pair(unit_env)
        await service.send_message(alumni, mentorship.id, "one")
        await service.send_message(alumni, mentorship.id, "two")
        assert await service.count_unread(student.id) == 2

        await mentorship_service.set_active(admin, mentorship.id, False)

        assert await service.count_unread(student.id) == 0

    @pytest.mark.asyncio
    async def test_unread_for_user_without_messages(self, unit_env):
        """No messages means zero."""
        service = await unit_env.get(MessageService)
        student = await seed_account(unit_env, 1, Role.STUDENT)

        assert await service.count_unread(student.id) == 0

    @pytest.mark.asyncio
    async def test_conversations_ordered_by_latest_activity(self, unit_env):
        """Threads with the newest message come first."""
        service = await unit_env.get(MessageService)
        student, alumni_a, first = await _pair(unit_env, 1, 2)
        alumni_b = await seed_account(unit_env, 3, Role.ALUMNI)
        second = await open_mentorship(unit_env, student, alumni_b)
        await service.send_message(alumni_b, second.id, "older")
        await service.send_message(alumni_a, first.id, "newest")

        conversations = await service.list_conversations(student)

        assert [c.mentorship_id for c in conversations] == [first.id, second.id]
        latest = conversations[0]
        assert latest.partner_id == alumni_a.id
        assert latest.last_message_text == "newest"
        assert latest.last_sender_id == alumni_a.id
        assert latest.unread_count == 1

    @pytest.mark.asyncio
    async def test_conversations_skip_inactive(self, unit_env, admin):
        """Deactivated mentorships are not listed."""
        service = await unit_env.get(MessageService)
        mentorship_service = await unit_env.get(MentorshipService)
        student, _, mentorship = await _pair(unit_env)
        await mentorship_service.set_active(admin, mentorship.id, False)

        assert await service.list_conversations(student) == []
