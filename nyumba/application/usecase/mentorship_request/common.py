"""Shared response item for mentorship request use cases."""

from datetime import datetime

from pydantic import BaseModel

from nyumba.domain.model import MentorshipRequest
from nyumba.domain.value import RequestStatus


class MentorshipRequestItem(BaseModel):
    """A mentorship request as returned to clients."""

    id: int
    student_id: int
    alumni_id: int
    message: str
    status: RequestStatus
    requested_at: datetime
    responded_at: datetime | None = None

    @classmethod
    def from_domain(cls, request: MentorshipRequest) -> "MentorshipRequestItem":
        return cls(
            id=request.id,
            student_id=request.student_id,
            alumni_id=request.alumni_id,
            message=request.message,
            status=request.status,
            requested_at=request.requested_at,
            responded_at=request.responded_at,
        )
