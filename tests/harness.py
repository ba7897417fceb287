"""Test harness for unit, integration and E2E tests.

Integration tests expect a PostgreSQL at ``DATABASE__URL``.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio
from dishka import AsyncContainer
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from nyumba.domain.model import Account, Mentorship
from nyumba.domain.service import MentorshipRequestService, MentorshipService
from nyumba.domain.value import Caller, ResponseDecision, Role, UserId
from nyumba.persistence.repository.inmemory import InMemoryStore
from nyumba.persistence.tables import accounts_table
from nyumba.util.di import Component
from tests.di import build_test_container

REQUEST_MESSAGE = (
    "Hello, I am a second-year engineering student and would love your "
    "guidance on internships."
)


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Rolls back the request transaction when persistence is real

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_send_message(unit_env):
            service = await unit_env.get(MessageService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        components = unmock or set()
        container = build_test_container(unmock=components)

        async with container() as request_container:
            yield request_container

            if "persistence" in components:
                # Leave nothing behind in the shared database
                session = await request_container.get(AsyncSession)
                await session.rollback()

        await container.close()

    return _test_environment


async def seed_account(
    env: AsyncContainer, user_id: int, role: Role, active: bool = True
) -> Caller:
    """Insert an account into the in-memory store and return it as a caller."""
    store = await env.get(InMemoryStore)
    store.accounts[UserId(user_id)] = Account(
        id=UserId(user_id), role=role, name=f"{role.value} {user_id}", active=active
    )
    return Caller(id=UserId(user_id), role=role)


async def open_mentorship(
    env: AsyncContainer, student: Caller, alumni: Caller
) -> Mentorship:
    """Run the request/accept flow and return the resulting mentorship."""
    request_service = await env.get(MentorshipRequestService)
    mentorship_service = await env.get(MentorshipService)

    request = await request_service.create_request(
        student, alumni.id, REQUEST_MESSAGE
    )
    await request_service.respond(alumni, request.id, ResponseDecision.ACCEPTED)

    mentorship = await mentorship_service.mentorship_repository.find_active_between(
        student.id, alumni.id
    )
    assert mentorship is not None
    return mentorship


async def insert_account(
    env: AsyncContainer, user_id: int, role: Role, active: bool = True
) -> Caller:
    """Insert an account row into PostgreSQL and return it as a caller."""
    session = await env.get(AsyncSession)
    await session.execute(
        insert(accounts_table).values(
            id=user_id, name=f"{role.value} {user_id}", role=role.value, active=active
        )
    )
    return Caller(id=UserId(user_id), role=role)
