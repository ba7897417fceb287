"""Count unread messages use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MessageService
from nyumba.domain.value import Caller


class CountUnreadRequest(BaseModel):
    """Count unread request."""

    caller: Caller


class CountUnreadResponse(BaseModel):
    """Count unread response."""

    unread_count: int


class CountUnreadUseCase(BaseUseCase[CountUnreadRequest, CountUnreadResponse]):
    """Use case for the unread badge."""

    def __init__(self, message_service: MessageService) -> None:
        self.message_service = message_service

    async def execute(self, request: CountUnreadRequest) -> CountUnreadResponse:
        count = await self.message_service.count_unread(request.caller.id)
        return CountUnreadResponse(unread_count=count)
