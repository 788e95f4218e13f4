"""
Leaderboard view components for the Dark Dungeon bot.

Provides the interactive Discord UI for browsing the leaderboard.
"""

import logging
from typing import Optional

import discord
from discord.ui import View, Button, Select

from dungeon_bot.config import Config
from dungeon_bot.constants import PaginationConstants
from dungeon_bot.services.leaderboard import LeaderboardService, LeaderboardState
from dungeon_bot.utils.embeds import build_leaderboard_embed
from dungeon_bot.utils.error_embeds import ErrorEmbeds
from dungeon_bot.utils.exceptions import PageOutOfRangeError

logger = logging.getLogger(__name__)


def page_window(current_page: int, total_pages: int, size: int = PaginationConstants.MAX_PAGE_OPTIONS) -> range:
    """Pages offered in the jump menu: at most ``size`` pages centred on the current one."""
    start = max(1, min(current_page - size // 2, total_pages - size + 1))
    end = min(total_pages, start + size - 1)
    return range(start, end + 1)


class LeaderboardView(View):
    """Paginated leaderboard with retry and close controls."""

    def __init__(
        self,
        leaderboard_service: LeaderboardService,
        state: LeaderboardState,
        *,
        timeout: Optional[int] = None
    ):
        super().__init__(timeout=timeout or Config.VIEW_TIMEOUT_SECONDS)
        self.leaderboard_service = leaderboard_service
        self.state = state
        self.message: Optional[discord.Message] = None

        self._update_buttons()

    def _update_buttons(self):
        """Rebuild controls for the current state."""
        self.clear_items()
        busy = self.state.loading

        if self.state.error:
            retry_button = Button(
                label="Try Again",
                style=discord.ButtonStyle.danger,
                disabled=busy,
                custom_id="leaderboard:retry"
            )
            retry_button.callback = self.retry
            self.add_item(retry_button)
        elif self.state.total_pages > 1:
            prev_button = Button(
                label="Previous",
                style=discord.ButtonStyle.primary,
                disabled=busy or not self.state.has_previous,
                custom_id="leaderboard:prev"
            )
            prev_button.callback = self.previous_page
            self.add_item(prev_button)

            page_indicator = Button(
                label=f"Page {self.state.current_page}/{self.state.total_pages}",
                style=discord.ButtonStyle.secondary,
                disabled=True
            )
            self.add_item(page_indicator)

            next_button = Button(
                label="Next",
                style=discord.ButtonStyle.primary,
                disabled=busy or not self.state.has_next,
                custom_id="leaderboard:next"
            )
            next_button.callback = self.next_page
            self.add_item(next_button)

            page_select = PageSelect(self.state.current_page, self.state.total_pages)
            page_select.disabled = busy
            self.add_item(page_select)

        close_button = Button(
            label="Close",
            emoji="✖️",
            style=discord.ButtonStyle.secondary,
            custom_id="leaderboard:close",
            row=0
        )
        close_button.callback = self.close
        self.add_item(close_button)

    def build_embed(self) -> discord.Embed:
        return build_leaderboard_embed(self.state)

    async def previous_page(self, interaction: discord.Interaction):
        """Navigate to previous page."""
        await self._dispatch(interaction, self.state.previous_page)

    async def next_page(self, interaction: discord.Interaction):
        """Navigate to next page."""
        await self._dispatch(interaction, self.state.next_page)

    async def jump_to(self, interaction: discord.Interaction, page: int):
        """Navigate directly to ``page``."""
        await self._dispatch(interaction, self.state.jump_to, page)

    async def retry(self, interaction: discord.Interaction):
        """Reload from the first page after a failure."""
        await self._dispatch(interaction, self.state.retry)

    async def close(self, interaction: discord.Interaction):
        """Discard the leaderboard message and its state."""
        await interaction.response.defer()
        self.stop()
        try:
            await interaction.delete_original_response()
        except discord.HTTPException as e:
            logger.warning(f"Could not delete leaderboard message: {e}")

    async def _dispatch(self, interaction: discord.Interaction, operation, *args):
        """Show the loading state, run a navigation operation, then render the result."""
        await interaction.response.defer()

        self.state.loading = True
        await self._render(interaction)
        try:
            await operation(self.leaderboard_service, *args)
        except PageOutOfRangeError as e:
            await interaction.followup.send(embed=ErrorEmbeds.invalid_input(e.user_message), ephemeral=True)
        finally:
            # Navigation that turned out to be a no-op never reached the loader
            self.state.loading = False

        await self._render(interaction)

    async def _render(self, interaction: discord.Interaction):
        self._update_buttons()
        try:
            await interaction.followup.edit_message(
                message_id=interaction.message.id,
                embed=self.build_embed(),
                view=self
            )
        except discord.HTTPException as e:
            logger.error(f"Failed to update leaderboard message: {e}")

    async def on_timeout(self):
        """Disable all controls when the view expires."""
        for item in self.children:
            item.disabled = True

        if self.message is not None:
            try:
                await self.message.edit(view=self)
            except discord.HTTPException:
                logger.debug("Leaderboard message gone before timeout")
        logger.debug("LeaderboardView timed out")


class PageSelect(Select):
    """Dropdown for jumping to a page."""

    def __init__(self, current_page: int, total_pages: int):
        options = [
            discord.SelectOption(
                label=f"Page {page}",
                value=str(page),
                default=page == current_page
            )
            for page in page_window(current_page, total_pages)
        ]

        super().__init__(
            placeholder="Jump to page...",
            options=options,
            custom_id="leaderboard:page",
            row=1
        )

    async def callback(self, interaction: discord.Interaction):
        """Handle page selection."""
        view: LeaderboardView = self.view
        await view.jump_to(interaction, int(self.values[0]))
