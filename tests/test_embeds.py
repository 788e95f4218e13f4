"""
Display formatting and embed rendering for the leaderboard and profile views.
"""

import pytest

from helpers import WALLET_A, make_entry
from dungeon_bot.data_models.leaderboard import LeaderboardEntry, PlayerIdentity
from dungeon_bot.data_models.profile import EventRow, PlayerStats, RecentEvents
from dungeon_bot.services.leaderboard import LeaderboardState
from dungeon_bot.services.profile import ProfileState
from dungeon_bot.utils.embeds import build_leaderboard_embed, build_profile_embed
from dungeon_bot.utils.formatting import (
    format_amount,
    format_score,
    format_wallet_address,
    rank_label,
    short_hash,
)


class TestFormatting:
    def test_wallet_address_is_shortened(self):
        assert format_wallet_address("0x1234567890abcdef1234567890abcdef12345678") == "0x1234...5678"

    def test_short_hash(self):
        assert short_hash("0x" + "ab" * 32) == "0xababab…ababab"
        assert short_hash("") == ""

    @pytest.mark.parametrize("value, expected", [
        ("0", "0"),
        ("999", "999"),
        ("1500", "1.500"),
        ("1234567", "1.234.567"),
        ("-2500", "-2.500"),
        ("1234.5", "1.234,5"),
        ("", "0"),
        ("abc", "NaN"),
    ])
    def test_amounts_use_turkish_grouping(self, value, expected):
        assert format_amount(value) == expected

    def test_very_large_fractional_amount(self):
        assert format_amount("1" * 30 + ".5") == ".".join(["111"] * 10) + ",5"
        assert format_amount("-" + "9" * 40 + ".9999") == "-10" + ".000" * 13

    def test_score_grouping(self):
        assert format_score(1234567) == "1,234,567"

    def test_rank_label_medals(self):
        assert rank_label(1) == "🥇 #1"
        assert rank_label(3) == "🥉 #3"
        assert rank_label(4) == "#4"


def loaded_leaderboard(identity=None, rows=None):
    state = LeaderboardState(identity=identity)
    state.entries = [LeaderboardEntry.from_dict(row) for row in (rows if rows is not None else [make_entry(1, "a"), make_entry(2, "b")])]
    state.total_pages = 2
    state.total_players = 4
    state.loading = False
    return state


class TestLeaderboardEmbed:
    def test_loading_state(self):
        embed = build_leaderboard_embed(LeaderboardState())
        assert "Loading leaderboard..." in embed.description

    def test_error_state(self):
        state = loaded_leaderboard()
        state.error = "Server returned 500: Internal Server Error"
        embed = build_leaderboard_embed(state)
        assert embed.title == "Error Loading Leaderboard"
        assert "Server returned 500" in embed.description

    def test_rows_and_footer(self):
        embed = build_leaderboard_embed(loaded_leaderboard())
        assert "🥇 #1 a" in embed.description
        assert "🥈 #2 b" in embed.description
        assert embed.footer.text == "Page 1/2 | Total Players: 4"
        assert not embed.fields

    def test_current_player_is_highlighted(self):
        embed = build_leaderboard_embed(loaded_leaderboard(identity=PlayerIdentity(username="b")))
        highlighted = [line for line in embed.description.splitlines() if line.startswith("▶")]
        assert len(highlighted) == 1
        assert "#2 b" in highlighted[0]
        assert embed.fields[0].name == "Your Position"
        assert "#2" in embed.fields[0].value

    def test_unknown_player_has_no_position(self):
        embed = build_leaderboard_embed(loaded_leaderboard(identity=PlayerIdentity(username="c")))
        assert not embed.fields
        assert "▶" not in embed.description

    def test_empty_leaderboard(self):
        embed = build_leaderboard_embed(loaded_leaderboard(rows=[]))
        assert embed.description == "No adventurers have braved the dungeon yet."

    def test_long_page_is_truncated(self):
        rows = [make_entry(rank, f"player{rank}") for rank in range(1, 121)]
        embed = build_leaderboard_embed(loaded_leaderboard(rows=rows))
        assert len(embed.description) <= 4096
        assert "more not shown" in embed.description


class TestProfileEmbed:
    def test_loading_panels(self):
        state = ProfileState(WALLET_A)
        state.loading_stats = state.loading_events = True
        embed = build_profile_embed(state)
        values = [field.value for field in embed.fields]
        assert any("Consulting the ancient records" in value for value in values)
        assert any("Gathering tales from the bards" in value for value in values)

    def test_stats_and_events(self):
        state = ProfileState(WALLET_A)
        state.stats = PlayerStats.from_dict({"total": {"score": "15000", "transactions": "42"}})
        state.events = RecentEvents(
            rows=[EventRow("100", "0x" + "ab" * 32, "0xgame", WALLET_A, "1500", "2")],
            from_block="90",
            to_block="100",
        )
        embed = build_profile_embed(state)
        fields = {field.name: field.value for field in embed.fields}

        assert fields["Total Gold"].startswith("15000")
        # Missing per-game counters show as zero
        assert fields["This Dungeon Gold"].startswith("0")
        assert "**1.500**" in fields["⚔️ Recent Adventures"]
        assert "0xababab…ababab" in fields["⚔️ Recent Adventures"]
        assert embed.footer.text == "Blocks 90 to 100"

    def test_panel_errors_are_independent(self):
        state = ProfileState(WALLET_A)
        state.stats_error = "Failed to consult the ancient records: boom"
        state.events = RecentEvents(rows=[])
        fields = {field.name: field.value for field in build_profile_embed(state).fields}

        assert "Failed to consult the ancient records: boom" in fields["📜 Adventurers Tome"]
        assert fields["⚔️ Recent Adventures"] == "The scribes have no tales of your adventures yet..."

    def test_huge_event_amount_still_renders(self):
        state = ProfileState(WALLET_A)
        state.stats = PlayerStats.from_dict({"total": {"score": "7", "transactions": "1"}})
        state.events = RecentEvents(rows=[EventRow("1", "0x" + "ef" * 32, "0xgame", WALLET_A, "1" * 30 + ".5", "1")])
        fields = {field.name: field.value for field in build_profile_embed(state).fields}

        assert fields["Total Gold"].startswith("7")
        assert ",5**" in fields["⚔️ Recent Adventures"]

    def test_many_events_fit_in_field(self):
        state = ProfileState(WALLET_A)
        state.stats = PlayerStats.from_dict({})
        state.events = RecentEvents(rows=[
            EventRow(str(block), "0x" + "cd" * 32, "0xgame", WALLET_A, "123456789", "3")
            for block in range(50)
        ])
        value = {field.name: field.value for field in build_profile_embed(state).fields}["⚔️ Recent Adventures"]
        assert len(value) <= 1024
        assert value.endswith("more")
