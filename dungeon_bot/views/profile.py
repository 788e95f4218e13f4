"""
Profile view components for the Dark Dungeon bot.

Provides the interactive Discord UI for a player's stats and recent adventures.
"""

import logging
from typing import Optional

import discord
from discord.ui import View, Button

from dungeon_bot.config import Config
from dungeon_bot.data_models.leaderboard import PlayerIdentity
from dungeon_bot.services.leaderboard import LeaderboardService, LeaderboardState
from dungeon_bot.services.profile import ProfileService, ProfileState
from dungeon_bot.utils.embeds import build_profile_embed
from dungeon_bot.views.leaderboard import LeaderboardView


logger = logging.getLogger(__name__)


class ProfileView(View):
    """Interactive view for a player profile with refresh and leaderboard buttons."""

    def __init__(
        self,
        profile_service: ProfileService,
        leaderboard_service: LeaderboardService,
        state: ProfileState,
        *,
        timeout: Optional[int] = None
    ):
        super().__init__(timeout=timeout or Config.VIEW_TIMEOUT_SECONDS)
        self.profile_service = profile_service
        self.leaderboard_service = leaderboard_service
        self.state = state
        self.message: Optional[discord.Message] = None

        self._add_nav_buttons()

    def _add_nav_buttons(self):
        self.clear_items()
        busy = self.state.loading_stats or self.state.loading_events

        leaderboard_btn = Button(
            label="Hall of Champions",
            emoji="🏆",
            style=discord.ButtonStyle.primary,
            custom_id=f"profile:{self.state.address}:leaderboard"
        )
        leaderboard_btn.callback = self._leaderboard_callback
        self.add_item(leaderboard_btn)

        refresh_btn = Button(
            label="Refresh",
            emoji="🔮",
            style=discord.ButtonStyle.secondary,
            disabled=busy,
            custom_id=f"profile:{self.state.address}:refresh"
        )
        refresh_btn.callback = self._refresh_callback
        self.add_item(refresh_btn)

    def build_embed(self) -> discord.Embed:
        return build_profile_embed(self.state)

    async def _refresh_callback(self, interaction: discord.Interaction):
        """Reload both panels."""
        await interaction.response.defer()

        self.state.loading_stats = self.state.loading_events = True
        await self._render(interaction)
        await self.state.load(self.profile_service)
        await self._render(interaction)

    async def _leaderboard_callback(self, interaction: discord.Interaction):
        """Open the leaderboard with this wallet highlighted."""
        await interaction.response.defer(ephemeral=True, thinking=True)

        state = LeaderboardState(identity=PlayerIdentity(wallet_address=self.state.address))
        await state.load(self.leaderboard_service, 1)
        view = LeaderboardView(self.leaderboard_service, state)
        view.message = await interaction.followup.send(embed=view.build_embed(), view=view, ephemeral=True, wait=True)

    async def _render(self, interaction: discord.Interaction):
        self._add_nav_buttons()
        try:
            await interaction.followup.edit_message(
                message_id=interaction.message.id,
                embed=self.build_embed(),
                view=self
            )
        except discord.HTTPException as e:
            logger.error(f"Failed to update profile message: {e}")

    async def on_timeout(self):
        for item in self.children:
            item.disabled = True
        if self.message is not None:
            try:
                await self.message.edit(view=self)
            except discord.HTTPException:
                logger.debug("Profile message gone before timeout")
