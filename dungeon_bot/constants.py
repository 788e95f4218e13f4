"""
Bot-wide constants for the Dark Dungeon Discord bot.

Keeps game metadata, display limits and UI glyphs in one place.
"""

class GameConstants:
    """Metadata of the registered game."""

    NAME = "Dark Dungeon"
    URL = "https://dark-dungeon-mission7.vercel.app/"
    DESCRIPTION = "Procedurally generated dungeon crawler game with blockchain integration"

    # Score is submitted on-chain every SCORE_THRESHOLD points
    SCORE_THRESHOLD = 10
    # Every action that costs points counts as a transaction
    TRANSACTION_THRESHOLD = 1

class PaginationConstants:
    """Constants for paginated displays."""

    # Discord allows at most 25 options in a select menu
    MAX_PAGE_OPTIONS = 25

    # Usernames longer than this are truncated in the leaderboard table
    MAX_NAME_WIDTH = 16

class ProfileConstants:
    """Constants for the profile view."""

    # Number grouping used for per-event amounts (matches tr-TR)
    THOUSANDS_SEPARATOR = "."

    # Discord embed field values are capped at 1024 characters
    MAX_FIELD_LENGTH = 1024

    # Rows shown in the recent adventures table
    MAX_EVENT_ROWS = 10

class UIConstants:
    """Constants for Discord UI elements."""

    # Embed colors
    DUNGEON_COLOR = 0x3a2a5f       # Profile panels
    GOLD_COLOR = 0xd4af37          # Leaderboard
    HIGHLIGHT_COLOR = 0xf9d423     # "Your Position" summary
    ERROR_COLOR = 0xa81c38         # Errors

    # Medals for the top three ranks
    RANK_MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}

    # Emoji for UI elements
    TROPHY_EMOJI = "🏆"
    COIN_EMOJI = "🪙"
    SWORD_EMOJI = "🗡️"
    SHIELD_EMOJI = "🛡️"
    CASTLE_EMOJI = "🏰"
    CRYSTAL_EMOJI = "🔮"
    SKULL_EMOJI = "💀"
    HIGHLIGHT_MARKER = "▶"
