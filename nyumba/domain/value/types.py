"""Domain value objects for Nyumba Connect.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from nyumba.domain.value.common import RootValueObject, ValueObject
from nyumba.domain.value.identifiers import UserId


class Role(str, Enum):
    """Account role, as asserted by the identity token."""

    STUDENT = "student"
    ALUMNI = "alumni"
    ADMIN = "admin"


class RequestStatus(str, Enum):
    """Mentorship request lifecycle state.

    pending -> accepted | declined. Both outcomes are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"

    @property
    def is_terminal(self) -> bool:
        return self is not RequestStatus.PENDING

    @property
    def blocks_new_request(self) -> bool:
        """Whether a request in this state prevents another for the same pair."""
        return self in (RequestStatus.PENDING, RequestStatus.ACCEPTED)


class ResponseDecision(str, Enum):
    """An alumnus' answer to a pending request."""

    ACCEPTED = "accepted"
    DECLINED = "declined"

    def to_status(self) -> RequestStatus:
        return RequestStatus(self.value)


class MentorshipStatusFilter(str, Enum):
    """Filter for the administrative mentorship listing."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"


class RateLimitAction(str, Enum):
    """Actions subject to per-actor rate limits."""

    MENTORSHIP_REQUEST = "mentorship_request"
    SEND_MESSAGE = "send_message"


class Caller(ValueObject):
    """The authenticated account making a call.

    Passed explicitly into every operation instead of living in an
    ambient session.
    """

    id: UserId
    role: Role

    @property
    def is_student(self) -> bool:
        return self.role is Role.STUDENT

    @property
    def is_alumni(self) -> bool:
        return self.role is Role.ALUMNI

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


class RateLimitKey(RootValueObject[str]):
    """Counter key in the form ``<action>:<actor_id>``."""

    @field_validator("root")
    @classmethod
    def validate_key_format(cls, v: str) -> str:
        if not re.match(r"^[a-z_]+:\d+$", v):
            raise ValueError("Rate limit key must look like 'action:actor_id'")
        return v

    @classmethod
    def for_actor(cls, action: RateLimitAction, actor_id: UserId) -> "RateLimitKey":
        return cls(f"{action.value}:{actor_id}")
