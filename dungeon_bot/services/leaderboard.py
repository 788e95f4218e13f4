"""
Leaderboard service for the Dark Dungeon leaderboard view.

Fetches ranked scores from the public leaderboard API. The API has no CORS or
uptime guarantees, so each page request walks an ordered list of URL prefixes
(direct first, then proxies) and the first one that answers wins.
"""

import asyncio
import logging
import time
from typing import Callable, Iterable, List, Optional
from urllib.parse import quote

import aiohttp

from dungeon_bot.config import Config
from dungeon_bot.data_models.leaderboard import LeaderboardEntry, LeaderboardPage, PlayerIdentity
from dungeon_bot.services.base import BaseService
from dungeon_bot.utils.exceptions import (
    CandidateRequestError,
    HttpStatusError,
    LeaderboardUnavailableError,
    PageOutOfRangeError,
)

logger = logging.getLogger(__name__)

DIRECT = ""


class LeaderboardService(BaseService):
    """Service for leaderboard page retrieval with sequential candidate fallback."""

    def __init__(
        self,
        http_session: aiohttp.ClientSession,
        proxy_prefixes: Optional[Iterable[str]] = None,
        *,
        base_url: Optional[str] = None,
        game_id: Optional[int] = None,
        sort_by: Optional[str] = None,
        timeout: Optional[float] = None,
        clock: Callable[[], float] = time.time
    ):
        super().__init__(http_session, timeout=timeout)
        self.base_url = base_url or Config.LEADERBOARD_URL
        self.game_id = game_id if game_id is not None else Config.LEADERBOARD_GAME_ID
        self.sort_by = sort_by or Config.LEADERBOARD_SORT_BY
        self._clock = clock

        if proxy_prefixes is None:
            proxy_prefixes = Config.get_proxy_prefixes()
        self.candidates: List[str] = [DIRECT]
        for prefix in proxy_prefixes:
            if prefix and prefix not in self.candidates:
                self.candidates.append(prefix)

    def build_url(self, prefix: str, page: int) -> str:
        """Build the request URL for one candidate prefix."""
        # Timestamp defeats caches in front of the API
        target = (
            f"{self.base_url}?page={page}&gameId={self.game_id}"
            f"&sortBy={self.sort_by}&t={int(self._clock() * 1000)}"
        )
        if not prefix:
            return target
        # Query-style proxies need the target encoded so its own query survives
        if prefix.endswith(("=", "?")):
            return prefix + quote(target, safe="")
        return prefix + target

    async def fetch_page(self, page: int) -> LeaderboardPage:
        """Fetch a leaderboard page, trying each candidate in order until one succeeds."""
        if page < 1:
            raise PageOutOfRangeError(page, 1)

        failures: List[CandidateRequestError] = []
        for prefix in self.candidates:
            url = self.build_url(prefix, page)
            headers = {} if prefix else {
                'Accept': 'application/json',
                'Content-Type': 'application/json',
            }
            try:
                data = await self.get_json(url, headers=headers)
                page_data = LeaderboardPage.from_dict(data)
            except HttpStatusError as e:
                failure = CandidateRequestError(url, str(e))
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                failure = CandidateRequestError(url, str(e) or e.__class__.__name__)
            except (KeyError, TypeError, ValueError) as e:
                failure = CandidateRequestError(url, f"Malformed leaderboard response: {e}")
            else:
                logger.debug(
                    f"Leaderboard page {page} loaded via {'direct request' if not prefix else prefix} "
                    f"after {len(failures) + 1} attempt(s)"
                )
                return page_data

            logger.warning(f"Leaderboard candidate failed ({prefix or 'direct'}): {failure.reason}")
            failures.append(failure)

        logger.error(f"Failed to fetch leaderboard page {page}: all {len(failures)} candidates failed")
        raise LeaderboardUnavailableError(failures)


def is_current_player(entry: LeaderboardEntry, identity: Optional[PlayerIdentity]) -> bool:
    """Whether ``entry`` belongs to the viewing player (exact username, or exact wallet address)."""
    if identity is None:
        return False
    if identity.username and entry.username == identity.username:
        return True
    return bool(identity.wallet_address) and entry.wallet_address == identity.wallet_address


def find_current_player(
    entries: Iterable[LeaderboardEntry],
    identity: Optional[PlayerIdentity]
) -> Optional[LeaderboardEntry]:
    """Return the first entry matching the viewing player, or None."""
    if identity is None:
        return None
    for entry in entries:
        if is_current_player(entry, identity):
            return entry
    return None


class LeaderboardState:
    """
    View state of one open leaderboard.

    Entries are replaced wholesale by each successful fetch. When every
    candidate fails the previous entries stay in place and ``error`` is set;
    the view shows the error panel instead of the table until a retry succeeds.
    """

    def __init__(self, identity: Optional[PlayerIdentity] = None):
        self.identity = identity
        self.entries: List[LeaderboardEntry] = []
        self.current_page = 1
        self.total_pages = 1
        self.total_players = 0
        self.loading = True
        self.error: Optional[str] = None

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def current_player(self) -> Optional[LeaderboardEntry]:
        return find_current_player(self.entries, self.identity)

    async def load(self, service: LeaderboardService, page: int = 1) -> bool:
        """Fetch ``page`` and apply it to the state; returns False if it failed."""
        self.loading = True
        self.error = None
        try:
            page_data = await service.fetch_page(page)
        except LeaderboardUnavailableError as e:
            self.error = str(e)
            return False
        else:
            self.entries = list(page_data.entries)
            self.total_pages = max(page_data.pagination.total_pages, 1)
            self.total_players = page_data.pagination.total
            self.current_page = page
            return True
        finally:
            self.loading = False

    async def previous_page(self, service: LeaderboardService) -> bool:
        """Load the previous page; no request is made on the first page."""
        if not self.has_previous:
            return False
        await self.load(service, self.current_page - 1)
        return True

    async def next_page(self, service: LeaderboardService) -> bool:
        """Load the next page; no request is made on the last page."""
        if not self.has_next:
            return False
        await self.load(service, self.current_page + 1)
        return True

    async def jump_to(self, service: LeaderboardService, page: int) -> bool:
        """Load an arbitrary page within [1, total_pages]."""
        if not 1 <= page <= self.total_pages:
            raise PageOutOfRangeError(page, self.total_pages)
        return await self.load(service, page)

    async def retry(self, service: LeaderboardService) -> bool:
        """Re-run the full candidate sequence from page 1."""
        return await self.load(service, 1)
