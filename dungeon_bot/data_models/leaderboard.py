"""
Leaderboard data models for the Dark Dungeon leaderboard view.

Immutable data transfer objects parsed from the leaderboard API response.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row."""
    user_id: int
    username: str
    wallet_address: str
    score: int
    game_id: int
    game_name: str
    rank: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardEntry":
        return cls(
            user_id=int(data["userId"]),
            username=str(data["username"]),
            wallet_address=str(data["walletAddress"]),
            score=int(data["score"]),
            game_id=int(data["gameId"]),
            game_name=str(data.get("gameName", "")),
            rank=int(data["rank"]),
        )


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata as reported by the server."""
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pagination":
        # The server reports ``total`` as a string
        return cls(
            page=int(data["page"]),
            limit=int(data["limit"]),
            total=int(data["total"]),
            total_pages=int(data["totalPages"]),
        )


@dataclass(frozen=True)
class LeaderboardPage:
    """One page of the leaderboard response."""
    entries: List[LeaderboardEntry]
    pagination: Pagination
    sort_by: str
    sort_order: str
    game_id: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaderboardPage":
        return cls(
            entries=[LeaderboardEntry.from_dict(row) for row in data["data"]],
            pagination=Pagination.from_dict(data["pagination"]),
            sort_by=str(data.get("sortBy", "")),
            sort_order=str(data.get("sortOrder", "")),
            game_id=int(data.get("gameId", 0)),
        )


@dataclass(frozen=True)
class PlayerIdentity:
    """Identity of the player viewing the leaderboard, used for highlighting."""
    username: str = ""
    wallet_address: str = ""
    score: int = 0

    @classmethod
    def from_options(cls, username: Optional[str], wallet_address: Optional[str]) -> Optional["PlayerIdentity"]:
        """Build an identity from optional command options; None when both are empty."""
        username = (username or "").strip()
        wallet_address = (wallet_address or "").strip()
        if not username and not wallet_address:
            return None
        return cls(username=username, wallet_address=wallet_address)
