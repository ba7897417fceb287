"""List thread use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MessageService
from nyumba.domain.value import Caller, MentorshipId

from .common import MessageItem


class ListThreadRequest(BaseModel):
    """List thread request."""

    caller: Caller
    mentorship_id: int


class ListThreadResponse(BaseModel):
    """List thread response."""

    mentorship_id: int
    messages: list[MessageItem]


class ListThreadUseCase(BaseUseCase[ListThreadRequest, ListThreadResponse]):
    """Use case for opening a conversation.

    Opening a thread marks the caller's inbound messages read.
    """

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: ListThreadRequest) -> ListThreadResponse:
        messages = await self.message_service.list_thread(
            request.caller, MentorshipId(request.mentorship_id)
        )
        return ListThreadResponse(
            mentorship_id=request.mentorship_id,
            messages=[MessageItem.from_domain(m) for m in messages],
        )
