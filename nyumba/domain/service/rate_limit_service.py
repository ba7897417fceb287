"""Rate limit domain service."""

import math
from datetime import datetime, timedelta, timezone

import logfire

from nyumba.domain.error import RateLimitedError
from nyumba.domain.repository import RateLimitRepository
from nyumba.domain.value import RateLimitAction, RateLimitKey, UserId

from .base import Service


class RateLimitService(Service):
    """Sliding-window limits per (action, actor)."""

    def __init__(self, rate_limit_repository: RateLimitRepository) -> None:
        self.rate_limit_repository = rate_limit_repository

    async def hit(
        self,
        action: RateLimitAction,
        actor_id: UserId,
        limit: int,
        window_seconds: int,
    ) -> None:
        """Consume one slot for the actor, or refuse.

        A refused call records nothing, so it does not extend the window.

        Args:
            action: The limited action
            actor_id: The acting user
            limit: Maximum actions per window
            window_seconds: Window length

        Raises:
            RateLimitedError: If the actor already used every slot
        """
        key = RateLimitKey.for_actor(action, actor_id)
        now = datetime.now(timezone.utc)
        window_start = now - timedelta(seconds=window_seconds)

        with logfire.span("rate_limit_service.hit", key=str(key), limit=limit):
            allowed = await self.rate_limit_repository.hit_if_under(
                key, limit, window_start, now
            )
            if not allowed:
                retry_after = await self._retry_after(
                    key, window_start, window_seconds, now
                )
                logfire.warn(
                    "Rate limit exceeded",
                    key=str(key),
                    limit=limit,
                    window_seconds=window_seconds,
                    retry_after_seconds=retry_after,
                )
                raise RateLimitedError(str(key), limit, window_seconds, retry_after)

    async def _retry_after(
        self,
        key: RateLimitKey,
        window_start: datetime,
        window_seconds: int,
        now: datetime,
    ) -> int:
        """Whole seconds until the oldest counted event expires, at least 1."""
        oldest = await self.rate_limit_repository.oldest_since(key, window_start)
        if oldest is None:
            return window_seconds
        expires_at = oldest + timedelta(seconds=window_seconds)
        remaining = math.ceil((expires_at - now).total_seconds())
        return min(max(remaining, 1), window_seconds)

    async def used(
        self, action: RateLimitAction, actor_id: UserId, window_seconds: int
    ) -> int:
        """Count the actor's recorded actions inside the current window."""
        key = RateLimitKey.for_actor(action, actor_id)
        window_start = datetime.now(timezone.utc) - timedelta(seconds=window_seconds)
        return await self.rate_limit_repository.count_since(key, window_start)
