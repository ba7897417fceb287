"""In-memory mentorship request repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from nyumba.domain.model.mentorship_request import MentorshipRequest
from nyumba.domain.repository.mentorship_request import MentorshipRequestRepository
from nyumba.domain.value import MentorshipRequestId, RequestStatus, UserId

from .store import InMemoryStore


class InMemoryMentorshipRequestRepository(MentorshipRequestRepository):
    """In-memory implementation of MentorshipRequestRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(
        self, request_id: MentorshipRequestId
    ) -> Optional[MentorshipRequest]:
        """Find a request by ID."""
        return self.store.requests.get(request_id)

    async def find_open_for_pair(
        self, student_id: UserId, alumni_id: UserId
    ) -> Optional[MentorshipRequest]:
        """Find the pending or accepted request for a pair."""
        for request in self.store.requests.values():
            if (
                request.student_id == student_id
                and request.alumni_id == alumni_id
                and request.status.blocks_new_request
            ):
                return request
        return None

    async def find_by_student(
        self, student_id: UserId, status: Optional[RequestStatus] = None
    ) -> list[MentorshipRequest]:
        """Find requests sent by a student, newest first."""
        return self._newest_first(
            r
            for r in self.store.requests.values()
            if r.student_id == student_id and (status is None or r.status == status)
        )

    async def find_by_alumni(
        self, alumni_id: UserId, status: Optional[RequestStatus] = None
    ) -> list[MentorshipRequest]:
        """Find requests addressed to an alumnus, newest first."""
        return self._newest_first(
            r
            for r in self.store.requests.values()
            if r.alumni_id == alumni_id and (status is None or r.status == status)
        )

    @staticmethod
    def _newest_first(requests) -> list[MentorshipRequest]:
        return sorted(requests, key=lambda r: (r.requested_at, r.id), reverse=True)

    async def create(
        self,
        student_id: UserId,
        alumni_id: UserId,
        message: str,
        requested_at: datetime,
    ) -> MentorshipRequest:
        """Create a pending request.

        Raises:
            IntegrityError: If an open request already exists for the pair
        """
        if await self.find_open_for_pair(student_id, alumni_id):
            raise IntegrityError("Duplicate open mentorship request", None, Exception())

        request = MentorshipRequest(
            id=MentorshipRequestId(self.store.next_id("mentorship_requests")),
            student_id=student_id,
            alumni_id=alumni_id,
            message=message,
            status=RequestStatus.PENDING,
            requested_at=requested_at,
        )
        self.store.requests[request.id] = request
        return request

    async def transition_pending(
        self,
        request_id: MentorshipRequestId,
        alumni_id: UserId,
        status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[MentorshipRequest]:
        """Compare-and-set from pending to a terminal status."""
        request = self.store.requests.get(request_id)
        if (
            request is None
            or request.alumni_id != alumni_id
            or request.status is not RequestStatus.PENDING
        ):
            return None

        updated = request.model_copy(
            update={"status": status, "responded_at": responded_at}
        )
        self.store.requests[request_id] = updated
        return updated
