"""Mentorship entity.

An accepted pairing between one student and one alumnus. Mentorships are
never deleted; an administrator may deactivate one, which stops new
messages but keeps the thread readable by its participants.
"""

from datetime import datetime
from typing import Optional

from nyumba.domain.error import NotFoundError, ValidationError
from nyumba.domain.model.common import DomainModel
from nyumba.domain.value import MentorshipId, UserId


class Mentorship(DomainModel):
    """Mentorship relationship between a student and an alumnus."""

    id: MentorshipId
    student_id: UserId
    alumni_id: UserId
    started_at: datetime
    active: bool = True

    def has_member(self, user_id: UserId) -> bool:
        return user_id in (self.student_id, self.alumni_id)

    def pairs(self, user_a: UserId, user_b: UserId) -> bool:
        """Whether this mentorship joins the two users, in either order."""
        return {self.student_id, self.alumni_id} == {user_a, user_b}


class MentorshipSummary(DomainModel):
    """Administrative listing row with thread activity."""

    mentorship: Mentorship
    message_count: int = 0
    last_message_at: Optional[datetime] = None


def resolve_participants(
    mentorship: Mentorship, caller_id: UserId
) -> tuple[UserId, UserId]:
    """Resolve ``(self, other)`` for a caller on a mentorship.

    Used by every thread operation so the receiver of a message is always
    the other member, never the sender.

    Args:
        mentorship: The relationship being accessed
        caller_id: The acting user

    Returns:
        Tuple of (caller_id, other member's id)

    Raises:
        NotFoundError: If the caller is not a member
        ValidationError: If the row pairs a user with themselves
    """
    if mentorship.student_id == mentorship.alumni_id:
        raise ValidationError(f"Mentorship {mentorship.id} is malformed")

    if caller_id == mentorship.student_id:
        return caller_id, mentorship.alumni_id
    if caller_id == mentorship.alumni_id:
        return caller_id, mentorship.student_id

    raise NotFoundError("Mentorship", str(mentorship.id))
