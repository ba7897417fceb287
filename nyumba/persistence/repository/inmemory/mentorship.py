"""In-memory mentorship repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from nyumba.domain.model.mentorship import Mentorship, MentorshipSummary
from nyumba.domain.repository.mentorship import MentorshipRepository
from nyumba.domain.value import MentorshipId, MentorshipStatusFilter, UserId

from .store import InMemoryStore


class InMemoryMentorshipRepository(MentorshipRepository):
    """In-memory implementation of MentorshipRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, mentorship_id: MentorshipId) -> Optional[Mentorship]:
        """Find a mentorship by ID."""
        return self.store.mentorships.get(mentorship_id)

    async def find_active_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Mentorship]:
        """Find the active mentorship joining two users, in either order."""
        for mentorship in self.store.mentorships.values():
            if mentorship.active and mentorship.pairs(user_a, user_b):
                return mentorship
        return None

    async def find_active_for_user(self, user_id: UserId) -> list[Mentorship]:
        """Find all active mentorships the user is a member of."""
        found = [
            m
            for m in self.store.mentorships.values()
            if m.active and m.has_member(user_id)
        ]
        return sorted(found, key=lambda m: m.started_at, reverse=True)

    async def create_active_if_absent(
        self, student_id: UserId, alumni_id: UserId, started_at: datetime
    ) -> Mentorship:
        """Insert an active mentorship unless the pair already has one."""
        existing = await self.find_active_between(student_id, alumni_id)
        if existing is not None:
            return existing

        mentorship = Mentorship(
            id=MentorshipId(self.store.next_id("mentorships")),
            student_id=student_id,
            alumni_id=alumni_id,
            started_at=started_at,
            active=True,
        )
        self.store.mentorships[mentorship.id] = mentorship
        return mentorship

    async def set_active(
        self, mentorship_id: MentorshipId, active: bool
    ) -> Optional[Mentorship]:
        """Set the active flag.

        Raises:
            IntegrityError: If activation collides with another active row
        """
        mentorship = self.store.mentorships.get(mentorship_id)
        if mentorship is None:
            return None

        if active:
            other = await self.find_active_between(
                mentorship.student_id, mentorship.alumni_id
            )
            if other is not None and other.id != mentorship_id:
                raise IntegrityError("Duplicate active mentorship", None, Exception())

        updated = mentorship.model_copy(update={"active": active})
        self.store.mentorships[mentorship_id] = updated
        return updated

    async def list_summaries(
        self, status: MentorshipStatusFilter, limit: int, offset: int
    ) -> list[MentorshipSummary]:
        """List mentorships with message statistics, newest first."""
        mentorships = [
            m
            for m in self.store.mentorships.values()
            if status is MentorshipStatusFilter.ALL
            or m.active == (status is MentorshipStatusFilter.ACTIVE)
        ]
        mentorships.sort(key=lambda m: (m.started_at, m.id), reverse=True)

        summaries = []
        for mentorship in mentorships[offset : offset + limit]:
            thread = [
                msg
                for msg in self.store.messages.values()
                if msg.mentorship_id == mentorship.id
            ]
            summaries.append(
                MentorshipSummary(
                    mentorship=mentorship,
                    message_count=len(thread),
                    last_message_at=max((msg.sent_at for msg in thread), default=None),
                )
            )
        return summaries
