"""Unit tests for mentorship administration use cases."""

import pytest

from nyumba.application.usecase.mentorship import (
    ListMentorshipsRequest,
    ListMentorshipsUseCase,
    SetMentorshipActiveRequest,
    SetMentorshipActiveUseCase,
)
from nyumba.domain.value import MentorshipStatusFilter, Role
from tests.harness import create_env_fixture, open_mentorship, seed_account

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_deactivate_then_list_inactive(unit_env, admin):
    """A deactivated mentorship moves to the inactive listing."""
    # Arrange
    set_active = await unit_env.get(SetMentorshipActiveUseCase)
    list_mentorships = await unit_env.get(ListMentorshipsUseCase)
    student = await seed_account(unit_env, 1, Role.STUDENT)
    alumni = await seed_account(unit_env, 2, Role.ALUMNI)
    mentorship = await open_mentorship(unit_env, student, alumni)

    # Act
    response = await set_active.execute(
        SetMentorshipActiveRequest(
            caller=admin, mentorship_id=mentorship.id, active=False
        )
    )
    inactive = await list_mentorships.execute(
        ListMentorshipsRequest(caller=admin, status=MentorshipStatusFilter.INACTIVE)
    )
    active = await list_mentorships.execute(
        ListMentorshipsRequest(caller=admin, status=MentorshipStatusFilter.ACTIVE)
    )

    # Assert
    assert response.mentorship.active is False
    assert [m.id for m in inactive.mentorships] == [mentorship.id]
    assert inactive.mentorships[0].message_count == 0
    assert active.mentorships == []


def test_listing_bounds_are_validated(admin):
    """Limit must be 1-200 and offset non-negative."""
    with pytest.raises(ValueError):
        ListMentorshipsRequest(caller=admin, limit=0)
    with pytest.raises(ValueError):
        ListMentorshipsRequest(caller=admin, limit=201)
    with pytest.raises(ValueError):
        ListMentorshipsRequest(caller=admin, offset=-1)
