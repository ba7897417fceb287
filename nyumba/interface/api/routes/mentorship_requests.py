"""Mentorship request routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from nyumba.application.usecase.mentorship_request import (
    CreateMentorshipRequestRequest,
    CreateMentorshipRequestResponse,
    CreateMentorshipRequestUseCase,
    GetMentorshipRequestRequest,
    GetMentorshipRequestResponse,
    GetMentorshipRequestUseCase,
    ListMentorshipRequestsRequest,
    ListMentorshipRequestsResponse,
    ListMentorshipRequestsUseCase,
    RespondToRequestRequest,
    RespondToRequestResponse,
    RespondToRequestUseCase,
)
from nyumba.domain.error import DomainError
from nyumba.domain.service import JWTService
from nyumba.domain.value import RequestStatus
from nyumba.interface.api.auth import resolve_caller
from nyumba.interface.error import to_http_exception

router = APIRouter(
    prefix="/mentorship/requests", tags=["mentorship"], route_class=DishkaRoute
)


class CreateRequestBody(BaseModel):
    """Body for a new mentorship request."""

    alumni_id: int
    message: str


class RespondBody(BaseModel):
    """Body for answering a request."""

    decision: str  # "accepted" or "declined"


@router.post(
    "",
    response_model=CreateMentorshipRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    body: CreateRequestBody,
    use_case: FromDishka[CreateMentorshipRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateMentorshipRequestResponse:
    """Send a mentorship request to an alumnus.

    Requires a student account. Limited to a few requests per hour.

    Args:
        body: Target alumnus and introduction message
        use_case: Create request use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The pending request

    Raises:
        HTTPException: 401 unauthenticated, 403 not a student, 400 invalid
            input, 409 duplicate, 429 rate limited
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            CreateMentorshipRequestRequest(
                caller=caller, alumni_id=body.alumni_id, message=body.message
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=ListMentorshipRequestsResponse)
async def list_requests(
    use_case: FromDishka[ListMentorshipRequestsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: RequestStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListMentorshipRequestsResponse:
    """List requests sent by the caller (students) or to them (alumni)."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            ListMentorshipRequestsRequest(caller=caller, status=status_filter)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{request_id}", response_model=GetMentorshipRequestResponse)
async def get_request(
    request_id: int,
    use_case: FromDishka[GetMentorshipRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetMentorshipRequestResponse:
    """Get one request. Only its student and alumnus can see it."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            GetMentorshipRequestRequest(caller=caller, request_id=request_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{request_id}/respond", response_model=RespondToRequestResponse)
async def respond_to_request(
    request_id: int,
    body: RespondBody,
    use_case: FromDishka[RespondToRequestUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> RespondToRequestResponse:
    """Accept or decline a pending request addressed to the caller.

    Accepting opens the mentorship.

    Raises:
        HTTPException: 404 unknown or not addressed to the caller,
            409 already responded, 400 invalid decision
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            RespondToRequestRequest(
                caller=caller, request_id=request_id, decision=body.decision
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
