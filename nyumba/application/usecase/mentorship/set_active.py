"""Set mentorship active use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipService
from nyumba.domain.value import Caller, MentorshipId

from .common import MentorshipItem


class SetMentorshipActiveRequest(BaseModel):
    """Set mentorship active request."""

    caller: Caller
    mentorship_id: int
    active: bool


class SetMentorshipActiveResponse(BaseModel):
    """Set mentorship active response."""

    mentorship: MentorshipItem


class SetMentorshipActiveUseCase(
    BaseUseCase[SetMentorshipActiveRequest, SetMentorshipActiveResponse]
):
    """Use case for an administrator activating or deactivating a mentorship.

    Deactivation stops new messages; the thread remains readable.
    """

    def __init__(self, mentorship_service: MentorshipService) -> None:
        """Initialize set mentorship active use case.

        Args:
            mentorship_service: Mentorship domain service
        """
        self.mentorship_service = mentorship_service

    async def execute(
        self, request: SetMentorshipActiveRequest
    ) -> SetMentorshipActiveResponse:
        mentorship = await self.mentorship_service.set_active(
            request.caller, MentorshipId(request.mentorship_id), request.active
        )
        return SetMentorshipActiveResponse(
            mentorship=MentorshipItem.from_domain(mentorship)
        )
