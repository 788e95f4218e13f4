"""
Services package for the Dark Dungeon bot.

HTTP-backed services for the leaderboard and profile views.
"""

from .base import BaseService
from .leaderboard import LeaderboardService, LeaderboardState
from .profile import ProfileService, ProfileState
from .rate_limiter import SimpleRateLimiter

__all__ = [
    'BaseService',
    'LeaderboardService',
    'LeaderboardState',
    'ProfileService',
    'ProfileState',
    'SimpleRateLimiter',
]
