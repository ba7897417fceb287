"""Mentorship administration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from nyumba.application.usecase.mentorship import (
    ListMentorshipsRequest,
    ListMentorshipsResponse,
    ListMentorshipsUseCase,
    SetMentorshipActiveRequest,
    SetMentorshipActiveResponse,
    SetMentorshipActiveUseCase,
)
from nyumba.domain.error import DomainError
from nyumba.domain.service import JWTService
from nyumba.domain.value import MentorshipStatusFilter
from nyumba.interface.api.auth import resolve_caller
from nyumba.interface.error import to_http_exception

router = APIRouter(prefix="/mentorships", tags=["mentorships"], route_class=DishkaRoute)


class SetActiveBody(BaseModel):
    """Body for toggling a mentorship."""

    active: bool


@router.get("", response_model=ListMentorshipsResponse)
async def list_mentorships(
    use_case: FromDishka[ListMentorshipsUseCase],
    jwt_service: FromDishka[JWTService],
    status: MentorshipStatusFilter = MentorshipStatusFilter.ALL,
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListMentorshipsResponse:
    """List mentorships with message counts. Admin only."""
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            ListMentorshipsRequest(
                caller=caller, status=status, limit=limit, offset=offset
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{mentorship_id}", response_model=SetMentorshipActiveResponse)
async def set_mentorship_active(
    mentorship_id: int,
    body: SetActiveBody,
    use_case: FromDishka[SetMentorshipActiveUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SetMentorshipActiveResponse:
    """Activate or deactivate a mentorship. Admin only.

    Raises:
        HTTPException: 403 not an admin, 404 unknown mentorship,
            409 pair already has another active mentorship
    """
    caller = resolve_caller(jwt_service, auth_token, authorization)

    try:
        return await use_case.execute(
            SetMentorshipActiveRequest(
                caller=caller, mentorship_id=mentorship_id, active=body.active
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
