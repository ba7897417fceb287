"""Integration tests for PostgresRateLimitRepository."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from nyumba.domain.repository import RateLimitRepository
from nyumba.domain.value import RateLimitAction, RateLimitKey, UserId
from nyumba.persistence.tables import rate_limit_events_table
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


class TestHitIfUnder:
    """Tests for hit_if_under."""

    @pytest.mark.asyncio
    async def test_refuses_at_limit(self, integration_env, next_user_id):
        """Once the window holds ``limit`` events, further hits are refused."""
        # Arrange
        repo = await integration_env.get(RateLimitRepository)
        key = RateLimitKey.for_actor(
            RateLimitAction.SEND_MESSAGE, UserId(next_user_id())
        )
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(seconds=60)

        # Act
        results = [
            await repo.hit_if_under(key, 3, window_start, now) for _ in range(4)
        ]

        # Assert
        assert results == [True, True, True, False]
        assert await repo.count_since(key, window_start) == 3

    @pytest.mark.asyncio
    async def test_prunes_expired_events(self, integration_env, next_user_id):
        """Events at or before the window start are deleted, not just ignored."""
        # Arrange
        repo = await integration_env.get(RateLimitRepository)
        session = await integration_env.get(AsyncSession)
        key = RateLimitKey.for_actor(
            RateLimitAction.MENTORSHIP_REQUEST, UserId(next_user_id())
        )
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(hours=1)
        await session.execute(
            insert(rate_limit_events_table),
            [
                {"key": str(key), "occurred_at": window_start - timedelta(minutes=i)}
                for i in range(3)
            ],
        )

        # Act
        allowed = await repo.hit_if_under(key, 1, window_start, now)

        # Assert
        assert allowed is True
        stored = await session.execute(
            select(func.count())
            .select_from(rate_limit_events_table)
            .where(rate_limit_events_table.c.key == str(key))
        )
        assert stored.scalar_one() == 1

    @pytest.mark.asyncio
    async def test_keys_are_counted_separately(self, integration_env, next_user_id):
        repo = await integration_env.get(RateLimitRepository)
        user_id = UserId(next_user_id())
        messages = RateLimitKey.for_actor(RateLimitAction.SEND_MESSAGE, user_id)
        requests = RateLimitKey.for_actor(RateLimitAction.MENTORSHIP_REQUEST, user_id)
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(seconds=60)

        assert await repo.hit_if_under(messages, 1, window_start, now) is True
        assert await repo.hit_if_under(requests, 1, window_start, now) is True
        assert await repo.hit_if_under(messages, 1, window_start, now) is False


class TestOldestSince:
    """Tests for oldest_since."""

    @pytest.mark.asyncio
    async def test_returns_earliest_event_in_window(
        self, integration_env, next_user_id
    ):
        repo = await integration_env.get(RateLimitRepository)
        key = RateLimitKey.for_actor(
            RateLimitAction.SEND_MESSAGE, UserId(next_user_id())
        )
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(seconds=60)
        earliest = now - timedelta(seconds=40)
        await repo.hit_if_under(key, 5, window_start, earliest)
        await repo.hit_if_under(key, 5, window_start, now)

        assert await repo.oldest_since(key, window_start) == earliest

    @pytest.mark.asyncio
    async def test_empty_window_returns_none(self, integration_env, next_user_id):
        repo = await integration_env.get(RateLimitRepository)
        key = RateLimitKey.for_actor(
            RateLimitAction.SEND_MESSAGE, UserId(next_user_id())
        )
        window_start = datetime.now(timezone.utc) - timedelta(seconds=60)

        assert await repo.oldest_since(key, window_start) is None
