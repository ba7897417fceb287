"""Create mentorship request use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipRequestService
from nyumba.domain.value import Caller, UserId

from .common import MentorshipRequestItem


class CreateMentorshipRequestRequest(BaseModel):
    """Create mentorship request request."""

    caller: Caller
    alumni_id: int
    message: str


class CreateMentorshipRequestResponse(BaseModel):
    """Create mentorship request response."""

    request: MentorshipRequestItem


class CreateMentorshipRequestUseCase(
    BaseUseCase[CreateMentorshipRequestRequest, CreateMentorshipRequestResponse]
):
    """Use case for a student asking an alumnus for mentorship."""

    def __init__(self, mentorship_request_service: MentorshipRequestService) -> None:
        """Initialize create mentorship request use case.

        Args:
            mentorship_request_service: Mentorship request domain service
        """
        self.mentorship_request_service = mentorship_request_service

    async def execute(
        self, request: CreateMentorshipRequestRequest
    ) -> CreateMentorshipRequestResponse:
        """Execute create mentorship request flow.

        Args:
            request: Caller, target alumnus and introduction message

        Returns:
            The new pending request

        Raises:
            NotAuthorizedError: If the caller is not a student
            ValidationError: If the message or target is invalid
            DuplicateRequestError: If the pair already has an open request
            RateLimitedError: If the student sent too many requests recently
        """
        created = await self.mentorship_request_service.create_request(
            request.caller, UserId(request.alumni_id), request.message
        )
        return CreateMentorshipRequestResponse(
            request=MentorshipRequestItem.from_domain(created)
        )
