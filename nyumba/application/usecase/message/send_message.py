"""Send message use case."""

from pydantic import BaseModel

from nyumba.application.usecase.base import BaseUseCase
from nyumba.domain.service import MessageService
from nyumba.domain.value import Caller, MentorshipId

from .common import MessageItem


class SendMessageRequest(BaseModel):
    """Send message request."""

    caller: Caller
    mentorship_id: int
    text: str


class SendMessageResponse(BaseModel):
    """Send message response."""

    message: MessageItem


class SendMessageUseCase(BaseUseCase[SendMessageRequest, SendMessageResponse]):
    """Use case for posting a message into a mentorship thread."""

    def __init__(self, message_service: MessageService) -> None:
        """Initialize send message use case.

        Args:
            message_service: Message domain service
        """
        self.message_service = message_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Execute send message flow.

        Args:
            request: Sender, thread and raw text

        Returns:
            The stored message

        Raises:
            ValidationError: If the text is empty or too long
            NotFoundError: If the caller is not a member of the mentorship
            NotAuthorizedError: If the mentorship is inactive
            RateLimitedError: If the sender is over the send rate
        """
        message = await self.message_service.send_message(
            request.caller, MentorshipId(request.mentorship_id), request.text
        )
        return SendMessageResponse(message=MessageItem.from_domain(message))
