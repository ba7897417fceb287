"""Mentorship request domain service."""

from datetime import datetime, timezone

import logfire
from sqlalchemy.exc import IntegrityError

from nyumba.config import MentorshipSettings
from nyumba.domain.error import (
    AlreadyRespondedError,
    DuplicateRequestError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from nyumba.domain.model.mentorship_request import MentorshipRequest
from nyumba.domain.repository import MentorshipRequestRepository, TransactionManager
from nyumba.domain.value import (
    Caller,
    MentorshipRequestId,
    RateLimitAction,
    RequestStatus,
    ResponseDecision,
    UserId,
    sanitize_text,
)

from .account_service import AccountService
from .base import Service
from .mentorship_service import MentorshipService
from .rate_limit_service import RateLimitService


class MentorshipRequestService(Service):
    """Domain service for the mentorship request state machine.

    pending -> accepted | declined. Acceptance guarantees exactly one
    active mentorship for the pair.
    """

    def __init__(
        self,
        request_repository: MentorshipRequestRepository,
        account_service: AccountService,
        mentorship_service: MentorshipService,
        rate_limit_service: RateLimitService,
        transaction_manager: TransactionManager,
        mentorship_settings: MentorshipSettings,
    ) -> None:
        """Initialize mentorship request service.

        Args:
            request_repository: Mentorship request repository
            account_service: Account domain service
            mentorship_service: Mentorship domain service
            rate_limit_service: Rate limit domain service
            transaction_manager: Atomic unit provider
            mentorship_settings: Length and rate limits
        """
        self.request_repository = request_repository
        self.account_service = account_service
        self.mentorship_service = mentorship_service
        self.rate_limit_service = rate_limit_service
        self.transaction_manager = transaction_manager
        self.settings = mentorship_settings

    async def create_request(
        self, caller: Caller, alumni_id: UserId, message: str
    ) -> MentorshipRequest:
        """Create a pending mentorship request.

        Args:
            caller: Requesting user, must be a student
            alumni_id: Target alumnus
            message: Introduction message

        Returns:
            The stored pending request

        Raises:
            NotAuthorizedError: If the caller is not a student
            ValidationError: If the message length is out of bounds or the
                alumnus is unavailable
            DuplicateRequestError: If the pair already has an open request
            RateLimitedError: If the student made too many requests recently
        """
        with logfire.span(
            "mentorship_request_service.create_request",
            student_id=caller.id,
            alumni_id=alumni_id,
        ):
            if not caller.is_student:
                raise NotAuthorizedError("Only students can request mentorship")

            clean = sanitize_text(message)
            min_length = self.settings.request_message_min_length
            max_length = self.settings.request_message_max_length
            if len(clean) < min_length:
                raise ValidationError(
                    f"Message must be at least {min_length} characters"
                )
            if len(clean) > max_length:
                raise ValidationError(f"Message cannot exceed {max_length} characters")

            await self.account_service.require_available_mentor(alumni_id)

            existing = await self.request_repository.find_open_for_pair(
                caller.id, alumni_id
            )
            if existing is not None:
                logfire.warn(
                    "Duplicate mentorship request",
                    student_id=caller.id,
                    alumni_id=alumni_id,
                    existing_request_id=existing.id,
                )
                raise DuplicateRequestError(caller.id, alumni_id)

            try:
                async with self.transaction_manager.atomic():
                    await self.rate_limit_service.hit(
                        RateLimitAction.MENTORSHIP_REQUEST,
                        caller.id,
                        self.settings.request_rate_limit,
                        self.settings.request_rate_window_seconds,
                    )
                    request = await self.request_repository.create(
                        student_id=caller.id,
                        alumni_id=alumni_id,
                        message=clean,
                        requested_at=datetime.now(timezone.utc),
                    )
            except IntegrityError:
                # Lost the race against a concurrent request for the pair
                logfire.warn(
                    "Duplicate mentorship request",
                    student_id=caller.id,
                    alumni_id=alumni_id,
                )
                raise DuplicateRequestError(caller.id, alumni_id)

            logfire.info(
                "Mentorship request created",
                request_id=request.id,
                student_id=caller.id,
                alumni_id=alumni_id,
            )
            return request

    async def respond(
        self,
        caller: Caller,
        request_id: MentorshipRequestId,
        decision: ResponseDecision | str,
    ) -> MentorshipRequest:
        """Accept or decline a pending request addressed to the caller.

        The status change and the mentorship creation commit together.

        Args:
            caller: Responding alumnus
            request_id: Request to answer
            decision: "accepted" or "declined"

        Returns:
            The updated request

        Raises:
            ValidationError: If the decision is not recognised
            NotFoundError: If the request is missing or addressed to someone else
            AlreadyRespondedError: If the request is no longer pending
        """
        try:
            decision = ResponseDecision(decision)
        except ValueError:
            raise ValidationError(f"Invalid decision: {decision}")

        status = decision.to_status()

        with logfire.span(
            "mentorship_request_service.respond",
            request_id=request_id,
            alumni_id=caller.id,
            decision=decision.value,
        ):
            async with self.transaction_manager.atomic():
                updated = await self.request_repository.transition_pending(
                    request_id, caller.id, status, datetime.now(timezone.utc)
                )

                if updated is None:
                    existing = await self.request_repository.find_by_id(request_id)
                    if existing is None or existing.alumni_id != caller.id:
                        raise NotFoundError("MentorshipRequest", str(request_id))
                    logfire.warn(
                        "Request already responded",
                        request_id=request_id,
                        status=existing.status.value,
                    )
                    raise AlreadyRespondedError(request_id)

                if status is RequestStatus.ACCEPTED:
                    await self.mentorship_service.ensure_active(
                        updated.student_id, updated.alumni_id
                    )

            logfire.info(
                f"Mentorship request {status.value}",
                request_id=request_id,
                student_id=updated.student_id,
                alumni_id=updated.alumni_id,
            )
            return updated

    async def list_requests(
        self, caller: Caller, status: RequestStatus | None = None
    ) -> list[MentorshipRequest]:
        """List the caller's sent (student) or received (alumni) requests.

        Raises:
            NotAuthorizedError: If the caller is an admin
        """
        with logfire.span(
            "mentorship_request_service.list_requests",
            user_id=caller.id,
            role=caller.role.value,
        ):
            if caller.is_student:
                return await self.request_repository.find_by_student(caller.id, status)
            if caller.is_alumni:
                return await self.request_repository.find_by_alumni(caller.id, status)
            raise NotAuthorizedError("Only students and alumni have mentorship requests")

    async def get_request(
        self, caller: Caller, request_id: MentorshipRequestId
    ) -> MentorshipRequest:
        """Get a request visible to the caller.

        Raises:
            NotFoundError: If missing or the caller is neither party
        """
        request = await self.request_repository.find_by_id(request_id)
        if request is None or not request.involves(caller.id):
            raise NotFoundError("MentorshipRequest", str(request_id))
        return request
