"""
Profile data models for the Dark Dungeon player profile view.

Counters and event amounts are kept as the strings the endpoints return;
they are uint256 values on-chain and only formatted for display.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ScoreCounters:
    """Lifetime score/transaction counters across all games."""
    score: str
    transactions: str


@dataclass(frozen=True)
class GameCounters:
    """Score/transaction counters for this game only."""
    score: str
    transactions: str
    game_address: str


@dataclass(frozen=True)
class PlayerStats:
    """Aggregate stats for a player."""
    total: Optional[ScoreCounters]
    game: Optional[GameCounters]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        total = data.get("total")
        game = data.get("game")
        return cls(
            total=ScoreCounters(
                score=str(total.get("score", "0")),
                transactions=str(total.get("transactions", "0")),
            ) if total else None,
            game=GameCounters(
                score=str(game.get("score", "0")),
                transactions=str(game.get("transactions", "0")),
                game_address=str(game.get("gameAddress", "")),
            ) if game else None,
        )


@dataclass(frozen=True)
class EventRow:
    """Single on-chain score update event."""
    block_number: str
    tx_hash: str
    game: str
    player: str
    score_amount: str
    transaction_amount: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventRow":
        return cls(
            block_number=str(data["blockNumber"]),
            tx_hash=str(data["txHash"]),
            game=str(data.get("game", "")),
            player=str(data.get("player", "")),
            score_amount=str(data.get("scoreAmount", "0")),
            transaction_amount=str(data.get("transactionAmount", "0")),
        )


@dataclass(frozen=True)
class RecentEvents:
    """Recent events within the requested block window."""
    rows: List[EventRow]
    from_block: Optional[str] = None
    to_block: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecentEvents":
        from_block = data.get("fromBlock")
        to_block = data.get("toBlock")
        return cls(
            rows=[EventRow.from_dict(row) for row in data.get("rows") or []],
            from_block=str(from_block) if from_block is not None else None,
            to_block=str(to_block) if to_block is not None else None,
        )
