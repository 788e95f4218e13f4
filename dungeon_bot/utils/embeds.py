"""
Shared embed builders for the Dark Dungeon bot.

Views and cogs render state through these functions so a page looks the same
whether it was opened by a command or reached through a button.
"""

from typing import Optional

import discord

from dungeon_bot.constants import GameConstants, PaginationConstants, ProfileConstants, UIConstants
from dungeon_bot.services.leaderboard import LeaderboardState, is_current_player
from dungeon_bot.services.profile import ProfileState
from dungeon_bot.utils.error_embeds import ErrorEmbeds
from dungeon_bot.utils.formatting import (
    format_amount,
    format_score,
    format_wallet_address,
    rank_label,
    short_hash,
    truncate,
)

# Embed descriptions are capped at 4096 characters
MAX_DESCRIPTION_LENGTH = 4000


def build_loading_embed(message: str = "Loading leaderboard...") -> discord.Embed:
    return discord.Embed(
        title=f"{GameConstants.NAME} Leaderboard",
        description=f"{UIConstants.CRYSTAL_EMOJI} {message}",
        color=UIConstants.GOLD_COLOR
    )


def build_leaderboard_embed(state: LeaderboardState) -> discord.Embed:
    """
    Render the leaderboard state.

    Args:
        state: Current leaderboard view state

    Returns:
        Loading embed while a fetch is in flight, the error panel after a
        failed fetch, otherwise the ranked table with the viewer's row marked.
    """
    if state.loading:
        return build_loading_embed()
    if state.error:
        return ErrorEmbeds.leaderboard_unavailable(state.error)

    embed = discord.Embed(
        title=f"{UIConstants.TROPHY_EMOJI} {GameConstants.NAME} Leaderboard",
        color=UIConstants.GOLD_COLOR
    )

    if not state.entries:
        embed.description = "No adventurers have braved the dungeon yet."
    else:
        lines = []
        length = 0
        for shown, entry in enumerate(state.entries):
            name = discord.utils.escape_markdown(truncate(entry.username, PaginationConstants.MAX_NAME_WIDTH))
            line = (
                f"{rank_label(entry.rank)} {name} · {format_score(entry.score)} · "
                f"`{format_wallet_address(entry.wallet_address)}`"
            )
            if is_current_player(entry, state.identity):
                line = f"{UIConstants.HIGHLIGHT_MARKER} **{line}**"
            if length + len(line) + 1 > MAX_DESCRIPTION_LENGTH:
                lines.append(f"... {len(state.entries) - shown} more not shown")
                break
            lines.append(line)
            length += len(line) + 1
        embed.description = "\n".join(lines)

    current = state.current_player
    if current is not None:
        embed.add_field(
            name="Your Position",
            value=f"**Rank:** #{current.rank} | **Score:** {format_score(current.score)}",
            inline=False
        )

    embed.set_footer(
        text=f"Page {state.current_page}/{state.total_pages} | Total Players: {state.total_players:,}"
    )
    return embed


def _stats_value(counter: Optional[object], attribute: str) -> str:
    return getattr(counter, attribute, None) or "0"


def build_profile_embed(state: ProfileState) -> discord.Embed:
    """Render both profile panels; each panel shows its own loading or error state."""
    embed = discord.Embed(
        title="Adventurers Chronicle",
        description=f"**Scroll of:** `{state.address}`",
        color=UIConstants.DUNGEON_COLOR
    )

    # Stats panel
    if state.loading_stats:
        embed.add_field(
            name="📜 Adventurers Tome",
            value=f"{UIConstants.CRYSTAL_EMOJI} Consulting the ancient records...",
            inline=False
        )
    elif state.stats is not None:
        total = state.stats.total
        game = state.stats.game
        embed.add_field(name="Total Gold", value=f"{_stats_value(total, 'score')} {UIConstants.COIN_EMOJI}", inline=True)
        embed.add_field(name="Quests Completed", value=f"{_stats_value(total, 'transactions')} {UIConstants.SWORD_EMOJI}", inline=True)
        embed.add_field(name="\u200b", value="\u200b", inline=True)
        embed.add_field(name="This Dungeon Gold", value=f"{_stats_value(game, 'score')} {UIConstants.COIN_EMOJI}", inline=True)
        embed.add_field(name="Dungeon Quests", value=f"{_stats_value(game, 'transactions')} {UIConstants.SHIELD_EMOJI}", inline=True)
        embed.add_field(name="\u200b", value="\u200b", inline=True)
    else:
        embed.add_field(
            name="📜 Adventurers Tome",
            value=f"{UIConstants.SKULL_EMOJI} {state.stats_error or 'Failed to read the tome: Unknown error'}",
            inline=False
        )

    # Recent events panel
    embed.add_field(name="⚔️ Recent Adventures", value=_events_value(state), inline=False)

    if state.events is not None and state.events.from_block and state.events.to_block:
        embed.set_footer(text=f"Blocks {state.events.from_block} to {state.events.to_block}")
    return embed


def _events_value(state: ProfileState) -> str:
    if state.loading_events:
        return f"{UIConstants.CRYSTAL_EMOJI} Gathering tales from the bards..."
    if state.events_error:
        return state.events_error
    if state.events is None or not state.events.rows:
        return "The scribes have no tales of your adventures yet..."

    rows = state.events.rows
    lines = []
    length = 0
    for row in rows[:ProfileConstants.MAX_EVENT_ROWS]:
        line = (
            f"`{row.block_number}` `{short_hash(row.tx_hash)}` · "
            f"**{format_amount(row.score_amount)}** {UIConstants.COIN_EMOJI} · "
            f"{format_amount(row.transaction_amount)} {UIConstants.SWORD_EMOJI}"
        )
        # Leave room for the "more" line
        if length + len(line) + 1 > ProfileConstants.MAX_FIELD_LENGTH - 40:
            break
        lines.append(line)
        length += len(line) + 1

    if len(lines) < len(rows):
        lines.append(f"... and {len(rows) - len(lines)} more")
    return "\n".join(lines)


def build_game_embed(game_address: str) -> discord.Embed:
    embed = discord.Embed(
        title=f"{UIConstants.CASTLE_EMOJI} {GameConstants.NAME}",
        description=GameConstants.DESCRIPTION,
        url=GameConstants.URL,
        color=UIConstants.DUNGEON_COLOR
    )
    embed.add_field(name="Game Address", value=f"`{game_address}`", inline=False)
    embed.add_field(
        name="Score Submission",
        value=(
            f"Every {GameConstants.SCORE_THRESHOLD} points of gold are recorded on-chain.\n"
            f"Every {GameConstants.TRANSACTION_THRESHOLD} paid action counts as a quest."
        ),
        inline=False
    )
    return embed
