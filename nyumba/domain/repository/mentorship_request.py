"""Mentorship request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from nyumba.domain.model.mentorship_request import MentorshipRequest
from nyumba.domain.value import MentorshipRequestId, RequestStatus, UserId


class MentorshipRequestRepository(ABC):
    """Repository for MentorshipRequest entity.

    Defines the contract for request persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, request_id: MentorshipRequestId
    ) -> Optional[MentorshipRequest]:
        """Find a request by ID.

        Args:
            request_id: The request's unique identifier

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_open_for_pair(
        self, student_id: UserId, alumni_id: UserId
    ) -> Optional[MentorshipRequest]:
        """Find the pending or accepted request for a pair, if any.

        Args:
            student_id: The requesting student's ID
            alumni_id: The target alumnus' ID

        Returns:
            The open request if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_student(
        self, student_id: UserId, status: Optional[RequestStatus] = None
    ) -> List[MentorshipRequest]:
        """Find requests sent by a student, newest first.

        Args:
            student_id: The student's ID
            status: Optional status filter

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def find_by_alumni(
        self, alumni_id: UserId, status: Optional[RequestStatus] = None
    ) -> List[MentorshipRequest]:
        """Find requests addressed to an alumnus, newest first.

        Args:
            alumni_id: The alumnus' ID
            status: Optional status filter

        Returns:
            List of requests
        """
        pass

    @abstractmethod
    async def create(
        self,
        student_id: UserId,
        alumni_id: UserId,
        message: str,
        requested_at: datetime,
    ) -> MentorshipRequest:
        """Create a pending request.

        Args:
            student_id: The requesting student's ID
            alumni_id: The target alumnus' ID
            message: Trimmed introduction message
            requested_at: Creation time

        Returns:
            The stored request with its assigned ID

        Raises:
            IntegrityError: If an open request already exists for the pair
        """
        pass

    @abstractmethod
    async def transition_pending(
        self,
        request_id: MentorshipRequestId,
        alumni_id: UserId,
        status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[MentorshipRequest]:
        """Move a pending request to a terminal status (compare-and-set).

        Only applies when the request exists, belongs to ``alumni_id`` and
        is still pending.

        Args:
            request_id: The request to update
            alumni_id: The responding alumnus
            status: Accepted or declined
            responded_at: Response time

        Returns:
            The updated request, or None if no row matched
        """
        pass
