import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PROXY_PREFIXES = (
    'https://corsproxy.io/?,'
    'https://api.allorigins.win/raw?url=,'
    'https://cors-anywhere.herokuapp.com/'
)

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support
    OWNER_DISCORD_ID = int(os.getenv('OWNER_DISCORD_ID', 0))

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    VIEW_TIMEOUT_SECONDS = int(os.getenv('VIEW_TIMEOUT_SECONDS', 900))

    # Leaderboard API
    LEADERBOARD_URL = os.getenv('LEADERBOARD_URL', 'https://monad-games-id-site.vercel.app/api/leaderboard')
    LEADERBOARD_GAME_ID = int(os.getenv('LEADERBOARD_GAME_ID', 135))
    LEADERBOARD_SORT_BY = os.getenv('LEADERBOARD_SORT_BY', 'scores')
    LEADERBOARD_PROXY_PREFIXES = os.getenv('LEADERBOARD_PROXY_PREFIXES', DEFAULT_PROXY_PREFIXES)

    # Stats/events endpoints served by the game site
    STATS_API_BASE = os.getenv('STATS_API_BASE', 'https://dark-dungeon-mission7.vercel.app')
    GAME_ADDRESS = os.getenv('GAME_ADDRESS', '0xEEfa0c1605562B4Aa419821204836Aa1826775D4')
    EVENTS_LIMIT = int(os.getenv('EVENTS_LIMIT', 50))
    EVENTS_BLOCK_RANGE = int(os.getenv('EVENTS_BLOCK_RANGE', 10000))

    # HTTP settings
    HTTP_TIMEOUT_SECONDS = float(os.getenv('HTTP_TIMEOUT_SECONDS', 10))

    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            # Multi-guild support: comma-separated IDs
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []

    @classmethod
    def get_proxy_prefixes(cls):
        """Get the fallback proxy prefixes tried after the direct request"""
        return [prefix.strip() for prefix in cls.LEADERBOARD_PROXY_PREFIXES.split(',') if prefix.strip()]

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.LEADERBOARD_URL:
            raise ValueError("LEADERBOARD_URL is required")
        if cls.HTTP_TIMEOUT_SECONDS <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be positive")
