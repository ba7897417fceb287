"""Mentorship repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from nyumba.domain.model.mentorship import Mentorship, MentorshipSummary
from nyumba.domain.value import MentorshipId, MentorshipStatusFilter, UserId


class MentorshipRepository(ABC):
    """Repository for Mentorship entity."""

    @abstractmethod
    async def find_by_id(self, mentorship_id: MentorshipId) -> Optional[Mentorship]:
        """Find a mentorship by ID.

        Args:
            mentorship_id: The mentorship's unique identifier

        Returns:
            The mentorship if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_between(
        self, user_a: UserId, user_b: UserId
    ) -> Optional[Mentorship]:
        """Find the active mentorship joining two users, in either order.

        Args:
            user_a: One user's ID
            user_b: The other user's ID

        Returns:
            The active mentorship if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active_for_user(self, user_id: UserId) -> List[Mentorship]:
        """Find all active mentorships the user is a member of.

        Args:
            user_id: The member's ID

        Returns:
            List of active mentorships
        """
        pass

    @abstractmethod
    async def create_active_if_absent(
        self, student_id: UserId, alumni_id: UserId, started_at: datetime
    ) -> Mentorship:
        """Insert an active mentorship unless the pair already has one.

        A concurrent insert that wins the unique index race is returned
        instead of raising.

        Args:
            student_id: The student member
            alumni_id: The alumni member
            started_at: Start time for a new row

        Returns:
            The pair's single active mentorship
        """
        pass

    @abstractmethod
    async def set_active(
        self, mentorship_id: MentorshipId, active: bool
    ) -> Optional[Mentorship]:
        """Set the active flag.

        Args:
            mentorship_id: The mentorship to update
            active: New flag value

        Returns:
            The updated mentorship, or None if it does not exist

        Raises:
            IntegrityError: If activation collides with another active row
        """
        pass

    @abstractmethod
    async def list_summaries(
        self, status: MentorshipStatusFilter, limit: int, offset: int
    ) -> List[MentorshipSummary]:
        """List mentorships with message statistics, newest first.

        Args:
            status: Active/inactive/all filter
            limit: Maximum rows
            offset: Rows to skip

        Returns:
            List of summaries
        """
        pass
