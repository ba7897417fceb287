"""Get mentorship request use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipRequestService
from nyumba.domain.value import Caller, MentorshipRequestId

from .common import MentorshipRequestItem


class GetMentorshipRequestRequest(BaseModel):
    """Get mentorship request request."""

    caller: Caller
    request_id: int


class GetMentorshipRequestResponse(BaseModel):
    """Get mentorship request response."""

    request: MentorshipRequestItem


class GetMentorshipRequestUseCase(
    BaseUseCase[GetMentorshipRequestRequest, GetMentorshipRequestResponse]
):
    """Use case for viewing one request as its student or alumnus."""

    def __init__(self, mentorship_request_service: MentorshipRequestService) -> None:
        self.mentorship_request_service = mentorship_request_service

    async def execute(
        self, request: GetMentorshipRequestRequest
    ) -> GetMentorshipRequestResponse:
        found = await self.mentorship_request_service.get_request(
            request.caller, MentorshipRequestId(request.request_id)
        )
        return GetMentorshipRequestResponse(
            request=MentorshipRequestItem.from_domain(found)
        )
