"""Test configuration and fixtures."""

import logfire
import pytest

from nyumba.domain.value import Caller, Role, UserId


def pytest_configure(config: pytest.Config) -> None:
    # Keep spans local during tests
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def admin() -> Caller:
    """An administrator; admins need no account row for their operations."""
    return Caller(id=UserId(99), role=Role.ADMIN)
