"""Messaging routes.

Clients poll ``/mentorships/{id}/messages/new`` every few seconds, passing
the last message id they hold as ``since_id``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from nyumba.application.usecase.message import (
    CountUnreadRequest,
    CountUnreadResponse,
    CountUnreadUseCase,
    FetchNewMessagesRequest,
    FetchNewMessagesResponse,
    FetchNewMessagesUseCase,
    ListConversationsRequest,
    ListConversationsResponse,
    ListConversationsUseCase,
    ListThreadRequest,
    ListThreadResponse,
    ListThreadUseCase,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
)
from nyumba.domain.error import DomainError
from nyumba.domain.service import JWTService
from nyumba.interface.api.auth import resolve_caller
from nyumba.interface.error import to_http_exception

router = APIRouter(tags=["messages"], route_class=DishkaRoute)


class SendMessageBody(BaseModel):
    """Body for a new message."""

    text: str


@router.post(
    "/mentorships/{mentorship_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    mentorship_id: int,
    body: SendMessageBody,
    use_case: FromDishka[SendMessageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SendMessageResponse:
    """Send a message to the other member of a mentorship.

    Raises:
        HTTPException: 404 not a member, 403 mentorship inactive,
            400 empty or too long, 429 rate limited
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            SendMessageRequest(caller=caller, mentorship_id=mentorship_id, text=body.text)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/mentorships/{mentorship_id}/messages", response_model=ListThreadResponse)
async def list_thread(
    mentorship_id: int,
    use_case: FromDishka[ListThreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListThreadResponse:
    """Get the full thread, marking messages to the caller as read."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            ListThreadRequest(caller=caller, mentorship_id=mentorship_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get(
    "/mentorships/{mentorship_id}/messages/new",
    response_model=FetchNewMessagesResponse,
)
async def fetch_new_messages(
    mentorship_id: int,
    use_case: FromDishka[FetchNewMessagesUseCase],
    jwt_service: FromDishka[JWTService],
    since_id: int = 0,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> FetchNewMessagesResponse:
    """Poll for messages newer than ``since_id``."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            FetchNewMessagesRequest(
                caller=caller, mentorship_id=mentorship_id, since_id=since_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/messages/unread-count", response_model=CountUnreadResponse)
async def unread_count(
    use_case: FromDishka[CountUnreadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CountUnreadResponse:
    """Unread messages addressed to the caller across active mentorships."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(CountUnreadRequest(caller=caller))
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/messages/conversations", response_model=ListConversationsResponse)
async def list_conversations(
    use_case: FromDishka[ListConversationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListConversationsResponse:
    """The caller's inbox, most recent activity first."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(ListConversationsRequest(caller=caller))
    except DomainError as e:
        raise to_http_exception(e)
