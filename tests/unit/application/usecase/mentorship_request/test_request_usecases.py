"""Unit tests for mentorship request use cases."""

import pytest

from nyumba.application.usecase.mentorship_request import (
    CreateMentorshipRequestRequest,
    CreateMentorshipRequestUseCase,
    GetMentorshipRequestRequest,
    GetMentorshipRequestUseCase,
    ListMentorshipRequestsRequest,
    ListMentorshipRequestsUseCase,
    RespondToRequestRequest,
    RespondToRequestUseCase,
)
from nyumba.domain.value import RequestStatus, Role
from tests.harness import REQUEST_MESSAGE, create_env_fixture, seed_account

unit_env = create_env_fixture()


class TestMentorshipRequestUseCases:
    """Create, respond, list and get through the application layer."""

    @pytest.mark.asyncio
    async def test_create_then_accept(self, unit_env):
        """The response items reflect each transition."""
        # Arrange
        create = await unit_env.get(CreateMentorshipRequestUseCase)
        respond = await unit_env.get(RespondToRequestUseCase)
        student = await seed_account(unit_env, 1, Role.STUDENT)
        alumni = await seed_account(unit_env, 2, Role.ALUMNI)

        # Act
        created = await create.execute(
            CreateMentorshipRequestRequest(
                caller=student, alumni_id=alumni.id, message=REQUEST_MESSAGE
            )
        )
        responded = await respond.execute(
            RespondToRequestRequest(
                caller=alumni, request_id=created.request.id, decision="accepted"
            )
        )

        # Assert
        assert created.request.status == RequestStatus.PENDING
        assert created.request.responded_at is None
        assert responded.request.status == RequestStatus.ACCEPTED
        assert responded.request.responded_at is not None

    @pytest.mark.asyncio
    async def test_list_and_get(self, unit_env):
        """Listing filters by status and get returns the same item."""
        create = await unit_env.get(CreateMentorshipRequestUseCase)
        list_requests = await unit_env.get(ListMentorshipRequestsUseCase)
        get_request = await unit_env.get(GetMentorshipRequestUseCase)
        student = await seed_account(unit_env, 1, Role.STUDENT)
        alumni = await seed_account(unit_env, 2, Role.ALUMNI)
        created = await create.execute(
            CreateMentorshipRequestRequest(
                caller=student, alumni_id=alumni.id, message=REQUEST_MESSAGE
            )
        )

        pending = await list_requests.execute(
            ListMentorshipRequestsRequest(caller=alumni, status=RequestStatus.PENDING)
        )
        declined = await list_requests.execute(
            ListMentorshipRequestsRequest(caller=alumni, status=RequestStatus.DECLINED)
        )
        fetched = await get_request.execute(
            GetMentorshipRequestRequest(caller=student, request_id=created.request.id)
        )

        assert [r.id for r in pending.requests] == [created.request.id]
        assert declined.requests == []
        assert fetched.request == created.request
