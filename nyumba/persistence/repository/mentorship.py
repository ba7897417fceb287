"""PostgreSQL implementation of Mentorship repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import and_, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError

from nyumba.domain.model import Mentorship, MentorshipSummary
from nyumba.domain.repository import MentorshipRepository
from nyumba.domain.value import MentorshipId, MentorshipStatusFilter, UserId
from nyumba.persistence.mappers import row_to_mentorship, row_to_mentorship_summary
from nyumba.persistence.repository.base import PostgresRepository
from nyumba.persistence.tables import mentorships_table, messages_table

mentorships = mentorships_table
messages = messages_table


class PostgresMentorshipRepository(PostgresRepository, MentorshipRepository):
    """PostgreSQL implementation of MentorshipRepository."""

    async def find_by_id(self, mentorship_id: MentorshipId) -> Optional[Mentorship]:
        """Find a mentorship by ID."""
        stmt = select(mentorships).where(mentorships.c.id == mentorship_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_mentorship(row._asdict()) if row else None

    async def find_active_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Mentorship]:
        """Find the active mentorship joining two users, in either order."""
        stmt = select(mentorships).where(
            and_(
                mentorships.c.active.is_(True),
                or_(
                    and_(
                        mentorships.c.student_id == user_a,
                        mentorships.c.alumni_id == user_b,
                    ),
                    and_(
                        mentorships.c.student_id == user_b,
                        mentorships.c.alumni_id == user_a,
                    ),
                ),
            )
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_mentorship(row._asdict()) if row else None

    async def find_active_for_user(self, user_id: UserId) -> List[Mentorship]:
        """Find all active mentorships the user is a member of."""
        stmt = (
            select(mentorships)
            .where(
                and_(
                    mentorships.c.active.is_(True),
                    or_(
                        mentorships.c.student_id == user_id,
                        mentorships.c.alumni_id == user_id,
                    ),
                )
            )
            .order_by(mentorships.c.started_at.desc())
        )
        result = await self._execute(stmt)
        return [row_to_mentorship(row._asdict()) for row in result.fetchall()]

    async def create_active_if_absent(
        self, student_id: UserId, alumni_id: UserId, started_at: datetime
    ) -> Mentorship:
        """Insert an active mentorship unless the pair already has one."""
        existing = await self.find_active_between(student_id, alumni_id)
        if existing is not None:
            return existing

        stmt = (
            insert(mentorships)
            .values(
                student_id=student_id,
                alumni_id=alumni_id,
                started_at=started_at,
                active=True,
            )
            .returning(mentorships)
        )
        try:
            async with self.session.begin_nested():
                result = await self._execute(stmt)
                row = result.one()
        except IntegrityError:
            # A concurrent acceptance created it first
            existing = await self.find_active_between(student_id, alumni_id)
            if existing is None:
                raise
            logfire.info(
                "Reusing concurrently created mentorship", mentorship_id=existing.id
            )
            return existing

        return row_to_mentorship(row._asdict())

    async def set_active(
        self, mentorship_id: MentorshipId, active: bool
    ) -> Optional[Mentorship]:
        """Set the active flag."""
        stmt = (
            update(mentorships)
            .where(mentorships.c.id == mentorship_id)
            .values(active=active)
            .returning(mentorships)
        )
        async with self.session.begin_nested():
            result = await self._execute(stmt)
            row = result.fetchone()
        return row_to_mentorship(row._asdict()) if row else None

    async def list_summaries(
        self, status: MentorshipStatusFilter, limit: int, offset: int
    ) -> List[MentorshipSummary]:
        """List mentorships with message statistics, newest first."""
        stats = (
            select(
                messages.c.mentorship_id,
                func.count(messages.c.id).label("message_count"),
                func.max(messages.c.sent_at).label("last_message_at"),
            )
            .group_by(messages.c.mentorship_id)
            .subquery()
        )

        stmt = select(
            mentorships, stats.c.message_count, stats.c.last_message_at
        ).select_from(
            mentorships.outerjoin(stats, stats.c.mentorship_id == mentorships.c.id)
        )
        if status is MentorshipStatusFilter.ACTIVE:
            stmt = stmt.where(mentorships.c.active.is_(True))
        elif status is MentorshipStatusFilter.INACTIVE:
            stmt = stmt.where(mentorships.c.active.is_(False))

        stmt = (
            stmt.order_by(mentorships.c.started_at.desc(), mentorships.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_mentorship_summary(row._asdict()) for row in result.fetchall()]
