import discord
from discord import app_commands
from discord.ext import commands
from typing import Optional
from dungeon_bot.config import Config
from dungeon_bot.data_models.leaderboard import PlayerIdentity
from dungeon_bot.services.leaderboard import LeaderboardService, LeaderboardState
from dungeon_bot.views.leaderboard import LeaderboardView
from dungeon_bot.services.rate_limiter import rate_limit
from dungeon_bot.utils.embeds import build_game_embed
from dungeon_bot.utils.error_embeds import ErrorEmbeds
import logging

logger = logging.getLogger(__name__)

class LeaderboardCog(commands.Cog):
    """Dark Dungeon leaderboard commands"""

    def __init__(self, bot):
        self.bot = bot
        self.leaderboard_service = LeaderboardService(bot.http_session)

    @app_commands.command(name="leaderboard", description="View the Dark Dungeon leaderboard")
    @app_commands.describe(
        username="Your username, to highlight your position",
        wallet="Your wallet address, to highlight your position"
    )
    @rate_limit("leaderboard", limit=5, window=60)
    async def leaderboard(
        self,
        interaction: discord.Interaction,
        username: Optional[str] = None,
        wallet: Optional[str] = None
    ):
        """Display the first leaderboard page."""
        await interaction.response.defer()

        try:
            state = LeaderboardState(identity=PlayerIdentity.from_options(username, wallet))
            await state.load(self.leaderboard_service, 1)

            view = LeaderboardView(self.leaderboard_service, state)
            view.message = await interaction.followup.send(embed=view.build_embed(), view=view, wait=True)

        except Exception as e:
            logger.error(f"Error in leaderboard command: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.command_error("An error occurred while fetching leaderboard data. Please try again later."))

    @app_commands.command(name="game", description="Show Dark Dungeon game information")
    async def game(self, interaction: discord.Interaction):
        """Display game metadata and the registered game address."""
        await interaction.response.send_message(embed=build_game_embed(Config.GAME_ADDRESS))

async def setup(bot):
    await bot.add_cog(LeaderboardCog(bot))
