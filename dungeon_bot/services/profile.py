"""
Profile service for the Dark Dungeon player profile view.

Reads aggregate on-chain stats and recent score events for a wallet from the
game site's API. The two reads are independent: either may fail without
affecting the other.
"""

import asyncio
import logging
import re
from typing import Optional

import aiohttp

from dungeon_bot.config import Config
from dungeon_bot.data_models.profile import PlayerStats, RecentEvents
from dungeon_bot.services.base import BaseService
from dungeon_bot.utils.exceptions import (
    EventsUnavailableError,
    HttpStatusError,
    InvalidWalletAddressError,
    StatsUnavailableError,
)

logger = logging.getLogger(__name__)

WALLET_ADDRESS_RE = re.compile(r'^0x[a-fA-F0-9]{40}$')


def normalize_wallet_address(address: Optional[str]) -> str:
    return (address or "").strip().lower()


def is_valid_wallet_address(address: Optional[str]) -> bool:
    """Check for a 0x-prefixed, 40-hex-character wallet address."""
    return bool(WALLET_ADDRESS_RE.match(normalize_wallet_address(address)))


def require_wallet_address(address: Optional[str]) -> str:
    """Return the normalized address or raise InvalidWalletAddressError."""
    if not is_valid_wallet_address(address):
        raise InvalidWalletAddressError(address or "")
    return normalize_wallet_address(address)


class ProfileService(BaseService):
    """Service for player stats and recent activity."""

    def __init__(self, http_session: aiohttp.ClientSession, *, api_base: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(http_session, timeout=timeout)
        self.api_base = (api_base or Config.STATS_API_BASE).rstrip('/')
        # Endpoints are computed on request, responses must not be cached
        self.headers = {'Accept': 'application/json', 'Cache-Control': 'no-store'}

    async def get_stats(self, address: str) -> PlayerStats:
        """Fetch lifetime and per-game counters for ``address``."""
        address = require_wallet_address(address)
        url = f"{self.api_base}/api/get-stats?player={address}"
        try:
            data = await self.get_json(url, headers=self.headers)
        except HttpStatusError as e:
            raise StatsUnavailableError(f"HTTP error! status: {e.status}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise StatsUnavailableError(str(e) or e.__class__.__name__) from e

        if not isinstance(data, dict) or not data.get('ok'):
            error = data.get('error') if isinstance(data, dict) else None
            raise StatsUnavailableError(error or 'Failed to load stats')
        try:
            return PlayerStats.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise StatsUnavailableError(f"Malformed stats response: {e}") from e

    async def get_recent_events(
        self,
        address: str,
        limit: Optional[int] = None,
        block_range: Optional[int] = None
    ) -> RecentEvents:
        """Fetch recent score events for ``address`` within the last ``block_range`` blocks."""
        address = require_wallet_address(address)
        limit = limit or Config.EVENTS_LIMIT
        block_range = block_range or Config.EVENTS_BLOCK_RANGE
        url = f"{self.api_base}/api/player/events?player={address}&limit={limit}&range={block_range}"
        try:
            data = await self.get_json(url, headers=self.headers)
        except HttpStatusError as e:
            raise EventsUnavailableError(f"HTTP error! status: {e.status}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise EventsUnavailableError(str(e) or e.__class__.__name__) from e

        if not isinstance(data, dict) or not data.get('ok'):
            error = data.get('error') if isinstance(data, dict) else None
            raise EventsUnavailableError(error or 'Failed to load events')
        try:
            return RecentEvents.from_dict(data)
        except (KeyError, TypeError) as e:
            raise EventsUnavailableError(f"Malformed events response: {e}") from e


class ProfileState:
    """View state of one open profile; stats and events keep separate flags."""

    def __init__(self, address: str):
        require_wallet_address(address)
        # Kept as entered; leaderboard highlighting compares addresses exactly
        self.address = address.strip()
        self.stats: Optional[PlayerStats] = None
        self.events: Optional[RecentEvents] = None
        self.loading_stats = False
        self.loading_events = False
        self.stats_error: Optional[str] = None
        self.events_error: Optional[str] = None

    async def load(self, service: ProfileService):
        """Load stats and events concurrently."""
        await asyncio.gather(self.load_stats(service), self.load_events(service))

    async def load_stats(self, service: ProfileService):
        self.loading_stats = True
        self.stats_error = None
        try:
            self.stats = await service.get_stats(self.address)
        except StatsUnavailableError as e:
            logger.warning(f"Stats unavailable for {self.address}: {e}")
            self.stats_error = e.user_message
        finally:
            self.loading_stats = False

    async def load_events(self, service: ProfileService):
        self.loading_events = True
        self.events_error = None
        try:
            self.events = await service.get_recent_events(self.address)
        except EventsUnavailableError as e:
            logger.warning(f"Events unavailable for {self.address}: {e}")
            self.events_error = e.user_message
        finally:
            self.loading_events = False
