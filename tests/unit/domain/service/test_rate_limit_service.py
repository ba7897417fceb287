"""Unit tests for RateLimitService."""

from datetime import datetime, timedelta, timezone

import pytest

from nyumba.domain.error import RateLimitedError
from nyumba.domain.service import RateLimitService
from nyumba.domain.value import RateLimitAction, UserId
from nyumba.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestHit:
    """Tests for hit."""

    @pytest.mark.asyncio
    async def test_allows_up_to_limit_then_refuses(self, unit_env):
        """The call after the limit is refused and not recorded."""
        # Arrange
        service = await unit_env.get(RateLimitService)
        action = RateLimitAction.SEND_MESSAGE

        # Act
        for _ in range(3):
            await service.hit(action, UserId(1), limit=3, window_seconds=60)

        # Assert
        with pytest.raises(RateLimitedError) as exc_info:
            await service.hit(action, UserId(1), limit=3, window_seconds=60)
        assert exc_info.value.key == "send_message:1"
        assert exc_info.value.window_seconds == 60
        assert await service.used(action, UserId(1), 60) == 3

    @pytest.mark.asyncio
    async def test_counters_are_per_actor_and_action(self, unit_env):
        """One actor's usage never affects another key."""
        service = await unit_env.get(RateLimitService)
        await service.hit(RateLimitAction.SEND_MESSAGE, UserId(1), 1, 60)

        await service.hit(RateLimitAction.SEND_MESSAGE, UserId(2), 1, 60)
        await service.hit(RateLimitAction.MENTORSHIP_REQUEST, UserId(1), 1, 60)

        assert await service.used(RateLimitAction.SEND_MESSAGE, UserId(1), 60) == 1

    @pytest.mark.asyncio
    async def test_window_slides(self, unit_env):
        """Events older than the window no longer count."""
        service = await unit_env.get(RateLimitService)
        store = await unit_env.get(InMemoryStore)
        long_ago = datetime.now(timezone.utc) - timedelta(seconds=61)
        store.rate_limit_events.extend([("send_message:1", long_ago)] * 10)

        await service.hit(RateLimitAction.SEND_MESSAGE, UserId(1), 10, 60)

        assert await service.used(RateLimitAction.SEND_MESSAGE, UserId(1), 60) == 1

    @pytest.mark.asyncio
    async def test_retry_after_counts_down_from_oldest_event(self, unit_env):
        """A refusal late in the window reports only the time left."""
        # Arrange
        service = await unit_env.get(RateLimitService)
        store = await unit_env.get(InMemoryStore)
        now = datetime.now(timezone.utc)
        store.rate_limit_events.extend(
            [
                ("mentorship_request:1", now - timedelta(minutes=59)),
                ("mentorship_request:1", now - timedelta(minutes=30)),
                ("mentorship_request:1", now - timedelta(minutes=1)),
            ]
        )

        # Act
        with pytest.raises(RateLimitedError) as exc_info:
            await service.hit(RateLimitAction.MENTORSHIP_REQUEST, UserId(1), 3, 3600)

        # Assert
        assert exc_info.value.window_seconds == 3600
        assert 55 <= exc_info.value.retry_after_seconds <= 60
