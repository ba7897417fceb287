"""Unit tests for domain models and value objects."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from nyumba.domain.error import NotFoundError, ValidationError
from nyumba.domain.model import Account, Mentorship, Message, resolve_participants
from nyumba.domain.value import (
    MentorshipId,
    MessageId,
    RateLimitAction,
    RateLimitKey,
    RequestStatus,
    ResponseDecision,
    Role,
    UserId,
    sanitize_text,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _mentorship(student_id: int = 1, alumni_id: int = 2) -> Mentorship:
    return Mentorship(
        id=MentorshipId(1),
        student_id=UserId(student_id),
        alumni_id=UserId(alumni_id),
        started_at=NOW,
    )


class TestResolveParticipants:
    """Tests for resolve_participants."""

    def test_student_and_alumni_see_each_other(self):
        mentorship = _mentorship()

        assert resolve_participants(mentorship, UserId(1)) == (1, 2)
        assert resolve_participants(mentorship, UserId(2)) == (2, 1)

    def test_non_member_is_not_found(self):
        with pytest.raises(NotFoundError):
            resolve_participants(_mentorship(), UserId(3))

    def test_self_pairing_is_malformed(self):
        with pytest.raises(ValidationError):
            resolve_participants(_mentorship(5, 5), UserId(5))


class TestMessage:
    """Tests for Message invariants."""

    def test_sender_cannot_be_receiver(self):
        with pytest.raises(PydanticValidationError):
            Message(
                id=MessageId(1),
                mentorship_id=MentorshipId(1),
                sender_id=UserId(1),
                receiver_id=UserId(1),
                text="hi",
                sent_at=NOW,
            )

    def test_sort_key_breaks_ties_by_id(self):
        common = dict(
            mentorship_id=MentorshipId(1),
            sender_id=UserId(1),
            receiver_id=UserId(2),
            text="hi",
            sent_at=NOW,
        )
        later_id = Message(id=MessageId(2), **common)
        earlier_id = Message(id=MessageId(1), **common)

        assert sorted([later_id, earlier_id], key=lambda m: m.sort_key) == [
            earlier_id,
            later_id,
        ]


class TestValues:
    """Tests for value types."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  hello  ", "hello"),
            ("a\x00b\x7fc", "abc"),
            ("tab\tkept", "tab\tkept"),
            ("line\r\nbreak", "line\r\nbreak"),
            ("\x0b\x0c\n", ""),
        ],
    )
    def test_sanitize_text(self, raw, expected):
        assert sanitize_text(raw) == expected

    def test_rate_limit_key_format(self):
        key = RateLimitKey.for_actor(RateLimitAction.MENTORSHIP_REQUEST, UserId(42))

        assert str(key) == "mentorship_request:42"
        with pytest.raises(PydanticValidationError):
            RateLimitKey("no-actor")

    def test_request_status_rules(self):
        assert RequestStatus.PENDING.blocks_new_request
        assert RequestStatus.ACCEPTED.blocks_new_request
        assert not RequestStatus.DECLINED.blocks_new_request
        assert not RequestStatus.PENDING.is_terminal
        assert ResponseDecision("declined").to_status() is RequestStatus.DECLINED

    def test_available_mentor(self):
        assert Account(id=UserId(1), role=Role.ALUMNI).is_available_mentor
        assert not Account(
            id=UserId(1), role=Role.ALUMNI, active=False
        ).is_available_mentor
        assert not Account(id=UserId(1), role=Role.STUDENT).is_available_mentor
