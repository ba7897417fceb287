"""Fetch new messages use case (polling)."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MessageService
from nyumba.domain.value import Caller, MentorshipId, MessageId

from .common import MessageItem


class FetchNewMessagesRequest(BaseModel):
    """Fetch new messages request."""

    caller: Caller
    mentorship_id: int
    since_id: int = 0


class FetchNewMessagesResponse(BaseModel):
    """Fetch new messages response.

    Clients pass ``last_message_id`` back as ``since_id`` on the next poll.
    """

    messages: list[MessageItem]
    total_unread: int
    last_message_id: int
    has_new_messages: bool


class FetchNewMessagesUseCase(
    BaseUseCase[FetchNewMessagesRequest, FetchNewMessagesResponse]
):
    """Use case for incremental thread polling."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(
        self, request: FetchNewMessagesRequest
    ) -> FetchNewMessagesResponse:
        update = await self.message_service.fetch_new(
            request.caller,
            MentorshipId(request.mentorship_id),
            MessageId(request.since_id),
        )
        return FetchNewMessagesResponse(
            messages=[MessageItem.from_domain(m) for m in update.messages],
            total_unread=update.total_unread,
            last_message_id=update.last_message_id,
            has_new_messages=update.has_new_messages,
        )
