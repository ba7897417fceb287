"""List mentorship requests use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipRequestService
from nyumba.domain.value import Caller, RequestStatus

from .common import MentorshipRequestItem


class ListMentorshipRequestsRequest(BaseModel):
    """List mentorship requests request."""

    caller: Caller
    status: RequestStatus | None = None


class ListMentorshipRequestsResponse(BaseModel):
    """List mentorship requests response."""

    requests: list[MentorshipRequestItem]


class ListMentorshipRequestsUseCase(
    BaseUseCase[ListMentorshipRequestsRequest, ListMentorshipRequestsResponse]
):
    """Use case for listing sent (student) or received (alumni) requests."""

    def __init__(self, mentorship_request_service: MentorshipRequestService) -> None:
        self.mentorship_request_service = mentorship_request_service

    async def execute(
        self, request: ListMentorshipRequestsRequest
    ) -> ListMentorshipRequestsResponse:
        found = await self.mentorship_request_service.list_requests(
            request.caller, request.status
        )
        return ListMentorshipRequestsResponse(
            requests=[MentorshipRequestItem.from_domain(r) for r in found]
        )
