"""List conversations use case (inbox)."""

from datetime import datetime

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MessageService
from nyumba.domain.value import Caller


class ConversationItem(BaseModel):
    """One inbox row."""

    mentorship_id: int
    partner_id: int
    started_at: datetime
    unread_count: int
    last_message_text: str | None = None
    last_message_at: datetime | None = None
    last_sender_id: int | None = None


class ListConversationsRequest(BaseModel):
    """List conversations request."""

    caller: Caller


class ListConversationsResponse(BaseModel):
    """List conversations response."""

    conversations: list[ConversationItem]


class ListConversationsUseCase(
    BaseUseCase[ListConversationsRequest, ListConversationsResponse]
):
    """Use case for the caller's inbox of active mentorships."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(
        self, request: ListConversationsRequest
    ) -> ListConversationsResponse:
        summaries = await self.message_service.list_conversations(request.caller)
        return ListConversationsResponse(
            conversations=[
                ConversationItem(
                    mentorship_id=s.mentorship_id,
                    partner_id=s.partner_id,
                    started_at=s.started_at,
                    unread_count=s.unread_count,
                    last_message_text=s.last_message_text,
                    last_message_at=s.last_message_at,
                    last_sender_id=s.last_sender_id,
                )
                for s in summaries
            ]
        )
