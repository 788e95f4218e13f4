"""
Base service class for the Dark Dungeon bot.

Wraps the shared aiohttp session that every upstream call goes through.
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

from dungeon_bot.config import Config
from dungeon_bot.utils.exceptions import HttpStatusError

logger = logging.getLogger(__name__)

class BaseService:
    """Base class for services that read JSON from remote endpoints."""

    def __init__(self, http_session: aiohttp.ClientSession, timeout: Optional[float] = None):
        """
        Initialize base service with the shared HTTP session.

        Args:
            http_session: Session owned by the bot; services never close it
            timeout: Total per-request timeout in seconds
        """
        self.http_session = http_session
        self.timeout = aiohttp.ClientTimeout(total=timeout or Config.HTTP_TIMEOUT_SECONDS)

    async def get_json(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """GET ``url`` and decode the body as JSON; raises HttpStatusError on non-2xx."""
        logger.debug(f"GET {url}")
        async with self.http_session.get(url, headers=headers or {}, timeout=self.timeout) as response:
            if not 200 <= response.status < 300:
                raise HttpStatusError(response.status, response.reason or "")
            # Proxies do not always forward the JSON content type
            return await response.json(content_type=None)
