"""Mentorship request entity.

A student's proposal for mentorship, awaiting the alumnus' response.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nyumba.domain.model.common import DomainModel
from nyumba.domain.value import MentorshipRequestId, RequestStatus, UserId


class MentorshipRequest(DomainModel):
    """Mentorship request entity.

    Business rules:
    - At most one pending or accepted request per (student, alumni) pair
      (enforced by a partial unique index)
    - Responded to exactly once, by the target alumnus
    - Immutable once accepted or declined
    """

    id: MentorshipRequestId
    student_id: UserId
    alumni_id: UserId
    message: str = Field(min_length=1)
    status: RequestStatus = RequestStatus.PENDING
    requested_at: datetime
    responded_at: Optional[datetime] = None

    def involves(self, user_id: UserId) -> bool:
        return user_id in (self.student_id, self.alumni_id)
