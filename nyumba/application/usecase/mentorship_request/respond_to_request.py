"""Respond to mentorship request use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipRequestService
from nyumba.domain.value import Caller, MentorshipRequestId

from .common import MentorshipRequestItem


class RespondToRequestRequest(BaseModel):
    """Respond to request request."""

    caller: Caller
    request_id: int
    decision: str  # "accepted" or "declined", validated by the domain


class RespondToRequestResponse(BaseModel):
    """Respond to request response."""

    request: MentorshipRequestItem


class RespondToRequestUseCase(
    BaseUseCase[RespondToRequestRequest, RespondToRequestResponse]
):
    """Use case for an alumnus accepting or declining a request.

    Acceptance also opens the mentorship, in the same atomic unit.
    """

    def __init__(self, mentorship_request_service: MentorshipRequestService) -> None:
        self.mentorship_request_service = mentorship_request_service

    async def execute(self, request: RespondToRequestRequest) -> RespondToRequestResponse:
        updated = await self.mentorship_request_service.respond(
            request.caller, MentorshipRequestId(request.request_id), request.decision
        )
        return RespondToRequestResponse(
            request=MentorshipRequestItem.from_domain(updated)
        )
