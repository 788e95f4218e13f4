import discord
from discord import app_commands
from discord.ext import commands
from dungeon_bot.services.leaderboard import LeaderboardService
from dungeon_bot.services.profile import ProfileService, ProfileState
from dungeon_bot.views.profile import ProfileView
from dungeon_bot.services.rate_limiter import rate_limit
from dungeon_bot.utils.error_embeds import ErrorEmbeds
from dungeon_bot.utils.exceptions import InvalidWalletAddressError
import logging

logger = logging.getLogger(__name__)

class ProfileCog(commands.Cog):
    """Player stats and recent on-chain activity"""

    def __init__(self, bot):
        self.bot = bot
        self.profile_service = ProfileService(bot.http_session)
        self.leaderboard_service = LeaderboardService(bot.http_session)

    @app_commands.command(name="profile", description="View a player's Dark Dungeon chronicle")
    @app_commands.describe(wallet="Wallet address of the player (0x followed by 40 hex characters)")
    @rate_limit("profile", limit=5, window=60)
    async def profile(self, interaction: discord.Interaction, wallet: str):
        """Display stats and recent adventures for a wallet."""
        # Validation happens before anything is sent upstream
        try:
            state = ProfileState(wallet)
        except InvalidWalletAddressError:
            logger.info(f"Rejected profile lookup for invalid wallet {wallet!r}")
            await interaction.response.send_message(embed=ErrorEmbeds.invalid_wallet_address(), ephemeral=True)
            return

        await interaction.response.defer()

        try:
            await state.load(self.profile_service)

            view = ProfileView(self.profile_service, self.leaderboard_service, state)
            view.message = await interaction.followup.send(embed=view.build_embed(), view=view, wait=True)

        except Exception as e:
            logger.error(f"Error in profile command: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.command_error("An error occurred while loading this profile. Please try again later."))

async def setup(bot):
    await bot.add_cog(ProfileCog(bot))
