"""List mentorships use case (admin)."""

from datetime import datetime

from pydantic import BaseModel, Field

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MentorshipService
from nyumba.domain.value import Caller, MentorshipStatusFilter

from .common import MentorshipItem


class MentorshipListItem(MentorshipItem):
    """Mentorship with thread activity."""

    message_count: int
    last_message_at: datetime | None = None


class ListMentorshipsRequest(BaseModel):
    """List mentorships request."""

    caller: Caller
    status: MentorshipStatusFilter = MentorshipStatusFilter.ALL
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListMentorshipsResponse(BaseModel):
    """List mentorships response."""

    mentorships: list[MentorshipListItem]


class ListMentorshipsUseCase(
    BaseUseCase[ListMentorshipsRequest, ListMentorshipsResponse]
):
    """Use case for the administrative mentorship overview."""

    def __init__(self, mentorship_service: MentorshipService) -> None:
        self.mentorship_service = mentorship_service

    async def execute(self, request: ListMentorshipsRequest) -> ListMentorshipsResponse:
        summaries = await self.mentorship_service.list_mentorships(
            request.caller, request.status, request.limit, request.offset
        )
        return ListMentorshipsResponse(
            mentorships=[
                MentorshipListItem(
                    **MentorshipItem.from_domain(s.mentorship).model_dump(),
                    message_count=s.message_count,
                    last_message_at=s.last_message_at,
                )
                for s in summaries
            ]
        )
