"""
Centralized error embeds for consistent error handling across the Dark Dungeon bot.
"""

import discord

from dungeon_bot.constants import UIConstants


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def leaderboard_unavailable(error: str) -> discord.Embed:
        """Create embed for when no leaderboard source could be reached."""
        embed = discord.Embed(
            title="Error Loading Leaderboard",
            description=error or "Failed to load leaderboard data",
            color=UIConstants.ERROR_COLOR
        )
        embed.set_footer(text="Use Try Again to reload from the first page.")
        return embed

    @staticmethod
    def invalid_wallet_address() -> discord.Embed:
        """Create embed for a missing or malformed wallet address."""
        embed = discord.Embed(
            title="Adventurers Scroll",
            description=(
                "🔍 Invalid or missing wallet address in the archives.\n\n"
                "A wallet address is `0x` followed by 40 hex characters."
            ),
            color=UIConstants.ERROR_COLOR
        )
        embed.set_footer(text=f"{UIConstants.CASTLE_EMOJI} Return to the Keep and try another scroll.")
        return embed

    @staticmethod
    def invalid_input(message: str) -> discord.Embed:
        """Create embed for invalid user input."""
        return discord.Embed(
            title="Invalid Input",
            description=message,
            color=UIConstants.ERROR_COLOR
        )

    @staticmethod
    def command_error(error: str) -> discord.Embed:
        """Create embed for general command errors."""
        return discord.Embed(
            title="Command Error",
            description=f"An error occurred: {error}\n\nPlease try again later.",
            color=UIConstants.ERROR_COLOR
        )
