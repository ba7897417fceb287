"""Mentorship domain service."""

from datetime import datetime, timezone

import logfire
from sqlalchemy.exc import IntegrityError

from nyumba.domain.error import (
    DuplicateMentorshipError,
    NotAuthorizedError,
    NotFoundError,
)
from nyumba.domain.model.mentorship import (
    Mentorship,
    MentorshipSummary,
    resolve_participants,
)
from nyumba.domain.repository import MentorshipRepository
from nyumba.domain.value import Caller, MentorshipId, MentorshipStatusFilter, UserId

from .base import Service


class MentorshipService(Service):
    """Domain service for the mentorship relationship store."""

    def __init__(self, mentorship_repository: MentorshipRepository) -> None:
        """Initialize mentorship service.

        Args:
            mentorship_repository: Mentorship repository
        """
        self.mentorship_repository = mentorship_repository

    async def is_active_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check whether two users share an active mentorship.

        Either user may be the student.
        """
        mentorship = await self.mentorship_repository.find_active_between(
            user_a, user_b
        )
        return mentorship is not None

    async def ensure_active(self, student_id: UserId, alumni_id: UserId) -> Mentorship:
        """Return the pair's active mentorship, creating it if absent.

        Args:
            student_id: Student member
            alumni_id: Alumni member

        Returns:
            The pair's single active mentorship
        """
        with logfire.span(
            "mentorship_service.ensure_active",
            student_id=student_id,
            alumni_id=alumni_id,
        ):
            mentorship = await self.mentorship_repository.create_active_if_absent(
                student_id, alumni_id, datetime.now(timezone.utc)
            )
            logfire.info(
                "Mentorship active",
                mentorship_id=mentorship.id,
                student_id=student_id,
                alumni_id=alumni_id,
            )
            return mentorship

    async def get_for_participant(
        self, mentorship_id: MentorshipId, caller_id: UserId
    ) -> tuple[Mentorship, UserId, UserId]:
        """Load a mentorship the caller belongs to.

        Args:
            mentorship_id: Mentorship ID
            caller_id: Acting user

        Returns:
            Tuple of (mentorship, caller_id, other member's id)

        Raises:
            NotFoundError: If the mentorship is missing or the caller is not
                a member
        """
        mentorship = await self.mentorship_repository.find_by_id(mentorship_id)
        if mentorship is None:
            raise NotFoundError("Mentorship", str(mentorship_id))

        self_id, other_id = resolve_participants(mentorship, caller_id)
        return mentorship, self_id, other_id

    async def set_active(
        self, caller: Caller, mentorship_id: MentorshipId, active: bool
    ) -> Mentorship:
        """Activate or deactivate a mentorship.

        Idempotent: setting the current value is a no-op. Messages are
        never touched.

        Args:
            caller: Acting user, must be an admin
            mentorship_id: Mentorship ID
            active: Desired flag

        Returns:
            The mentorship after the change

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the mentorship does not exist
            DuplicateMentorshipError: If activating would leave the pair with
                two active mentorships
        """
        with logfire.span(
            "mentorship_service.set_active",
            mentorship_id=mentorship_id,
            active=active,
            admin_id=caller.id,
        ):
            if not caller.is_admin:
                logfire.warn(
                    "Non-admin tried to change mentorship status",
                    user_id=caller.id,
                    role=caller.role.value,
                )
                raise NotAuthorizedError("Only administrators can change mentorships")

            mentorship = await self.mentorship_repository.find_by_id(mentorship_id)
            if mentorship is None:
                raise NotFoundError("Mentorship", str(mentorship_id))

            if mentorship.active == active:
                return mentorship

            try:
                updated = await self.mentorship_repository.set_active(
                    mentorship_id, active
                )
            except IntegrityError:
                logfire.warn(
                    "Reactivation collides with active mentorship",
                    mentorship_id=mentorship_id,
                )
                raise DuplicateMentorshipError(
                    mentorship.student_id, mentorship.alumni_id
                )

            if updated is None:
                raise NotFoundError("Mentorship", str(mentorship_id))

            logfire.info(
                "Mentorship activated" if active else "Mentorship deactivated",
                mentorship_id=mentorship_id,
                admin_id=caller.id,
            )
            return updated

    async def list_mentorships(
        self,
        caller: Caller,
        status: MentorshipStatusFilter = MentorshipStatusFilter.ALL,
        limit: int = 50,
        offset: int = 0,
    ) -> list[MentorshipSummary]:
        """List mentorships with thread statistics for administrators.

        Raises:
            NotAuthorizedError: If the caller is not an admin
        """
        with logfire.span(
            "mentorship_service.list_mentorships", status=status.value, limit=limit
        ):
            if not caller.is_admin:
                raise NotAuthorizedError("Only administrators can list mentorships")

            return await self.mentorship_repository.list_summaries(
                status, limit, offset
            )
