"""Shared response item for mentorship use cases."""

from datetime import datetime

from pydantic import BaseModel

from nyumba.domain.model import Mentorship


class MentorshipItem(BaseModel):
    """A mentorship as returned to clients."""

    id: int
    student_id: int
    alumni_id: int
    started_at: datetime
    active: bool

    @classmethod
    def from_domain(cls, mentorship: Mentorship) -> "MentorshipItem":
        return cls(
            id=mentorship.id,
            student_id=mentorship.student_id,
            alumni_id=mentorship.alumni_id,
            started_at=mentorship.started_at,
            active=mentorship.active,
        )
