"""
Rate limiting for slash commands that hit upstream APIs.

Sliding-window, in-memory limiter keyed by user and command.
"""

import time
import asyncio
from functools import wraps
from collections import deque
import logging

logger = logging.getLogger(__name__)

class SimpleRateLimiter:
    """In-memory rate limiter for Discord commands."""

    def __init__(self, clock=time.monotonic):
        self._requests = {}
        self._windows = {}
        self._lock = asyncio.Lock()
        self._clock = clock

    async def is_allowed(self, user_id: int, command: str, limit: int, window: int) -> bool:
        """Check if user can execute command within rate limit, recording the call if so."""
        if limit <= 0 or window <= 0:
            return False

        key = f"{user_id}:{command}"
        now = self._clock()

        async with self._lock:
            self._sweep(now)
            requests = self._requests.setdefault(key, deque())
            self._windows[key] = window
            while requests and requests[0] <= now - window:
                requests.popleft()

            if len(requests) < limit:
                requests.append(now)
                return True

            return False

    def _sweep(self, now: float):
        """Forget keys whose every recorded call has left its window."""
        expired = [
            key for key, requests in self._requests.items()
            if not requests or requests[-1] <= now - self._windows[key]
        ]
        for key in expired:
            del self._requests[key]
            del self._windows[key]

    async def retry_after(self, user_id: int, command: str, window: int) -> float:
        """Seconds until the oldest recorded call leaves the window."""
        key = f"{user_id}:{command}"
        async with self._lock:
            requests = self._requests.get(key)
            if not requests:
                return 0.0
            return max(0.0, requests[0] + window - self._clock())

def rate_limit(command: str, limit: int = 1, window: int = 60):
    """Decorator for rate limiting cog slash commands."""
    def decorator(func):
        @wraps(func)
        async def wrapper(self, interaction, *args, **kwargs):
            rate_limiter = self.bot.rate_limiter

            from dungeon_bot.config import Config
            if Config.OWNER_DISCORD_ID and interaction.user.id == Config.OWNER_DISCORD_ID:
                return await func(self, interaction, *args, **kwargs)

            if not await rate_limiter.is_allowed(interaction.user.id, command, limit, window):
                wait = await rate_limiter.retry_after(interaction.user.id, command, window)
                logger.info(f"Rate limited /{command} for user {interaction.user.id}")
                await interaction.response.send_message(
                    f"⏰ The dungeon needs a moment. Try `/{command}` again in {wait:.0f} seconds.",
                    ephemeral=True
                )
                return

            return await func(self, interaction, *args, **kwargs)
        return wrapper
    return decorator
