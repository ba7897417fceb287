"""PostgreSQL implementation of MentorshipRequest repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, insert, select, update

from nyumba.domain.model import MentorshipRequest
from nyumba.domain.repository import MentorshipRequestRepository
from nyumba.domain.value import MentorshipRequestId, RequestStatus, UserId
from nyumba.persistence.mappers import row_to_mentorship_request
from nyumba.persistence.repository.base import PostgresRepository
from nyumba.persistence.tables import mentorship_requests_table

requests = mentorship_requests_table


class PostgresMentorshipRequestRepository(
    PostgresRepository, MentorshipRequestRepository
):
    """PostgreSQL implementation of MentorshipRequestRepository."""

    async def find_by_id(
        self, request_id: MentorshipRequestId
    ) -> Optional[MentorshipRequest]:
        """Find a request by ID."""
        stmt = select(requests).where(requests.c.id == request_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_mentorship_request(row._asdict()) if row else None

    async def find_open_for_pair(
        self, student_id: UserId, alumni_id: UserId
    ) -> Optional[MentorshipRequest]:
        """Find the pending or accepted request for a pair."""
        stmt = select(requests).where(
            and_(
                requests.c.student_id == student_id,
                requests.c.alumni_id == alumni_id,
                requests.c.status.in_(
                    [RequestStatus.PENDING.value, RequestStatus.ACCEPTED.value]
                ),
            )
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_mentorship_request(row._asdict()) if row else None

    async def find_by_student(
        self, student_id: UserId, status: Optional[RequestStatus] = None
    ) -> List[MentorshipRequest]:
        """Find requests sent by a student, newest first."""
        return await self._find_for(requests.c.student_id == student_id, status)

    async def find_by_alumni(
        self, alumni_id: UserId, status: Optional[RequestStatus] = None
    ) -> List[MentorshipRequest]:
        """Find requests addressed to an alumnus, newest first."""
        return await self._find_for(requests.c.alumni_id == alumni_id, status)

    async def _find_for(
        self, condition, status: Optional[RequestStatus]
    ) -> List[MentorshipRequest]:
        stmt = select(requests).where(condition)
        if status is not None:
            stmt = stmt.where(requests.c.status == status.value)
        stmt = stmt.order_by(requests.c.requested_at.desc(), requests.c.id.desc())
        result = await self._execute(stmt)
        return [row_to_mentorship_request(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        student_id: UserId,
        alumni_id: UserId,
        message: str,
        requested_at: datetime,
    ) -> MentorshipRequest:
        """Insert a pending request.

        Runs in a savepoint so a unique index violation leaves the outer
        transaction usable.
        """
        stmt = (
            insert(requests)
            .values(
                student_id=student_id,
                alumni_id=alumni_id,
                message=message,
                status=RequestStatus.PENDING.value,
                requested_at=requested_at,
            )
            .returning(requests)
        )
        async with self.session.begin_nested():
            result = await self._execute(stmt)
            row = result.one()
        return row_to_mentorship_request(row._asdict())

    async def transition_pending(
        self,
        request_id: MentorshipRequestId,
        alumni_id: UserId,
        status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[MentorshipRequest]:
        """Compare-and-set from pending to a terminal status."""
        stmt = (
            update(requests)
            .where(
                and_(
                    requests.c.id == request_id,
                    requests.c.alumni_id == alumni_id,
                    requests.c.status == RequestStatus.PENDING.value,
                )
            )
            .values(status=status.value, responded_at=responded_at)
            .returning(requests)
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_mentorship_request(row._asdict()) if row else None
