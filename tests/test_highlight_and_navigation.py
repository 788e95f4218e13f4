"""
Current-player highlight matching and page navigation bounds.
"""

import pytest

from helpers import WALLET_A, WALLET_B, FakeResponse, FakeSession, make_entry, make_leaderboard_payload
from dungeon_bot.data_models.leaderboard import LeaderboardEntry, PlayerIdentity
from dungeon_bot.services.leaderboard import (
    LeaderboardService,
    LeaderboardState,
    find_current_player,
    is_current_player,
)
from dungeon_bot.services.profile import ProfileState
from dungeon_bot.utils.exceptions import PageOutOfRangeError
from dungeon_bot.views.leaderboard import page_window


def entries(*rows):
    return [LeaderboardEntry.from_dict(row) for row in rows]


class TestHighlightMatching:
    def test_matches_by_username(self):
        rows = entries(make_entry(1, "a"), make_entry(2, "b"))
        match = find_current_player(rows, PlayerIdentity(username="b"))
        assert match is not None
        assert match.username == "b"

    def test_no_match_returns_none(self):
        rows = entries(make_entry(1, "a"), make_entry(2, "b"))
        assert find_current_player(rows, PlayerIdentity(username="c")) is None

    def test_no_identity_returns_none(self):
        rows = entries(make_entry(1, "a"))
        assert find_current_player(rows, None) is None

    def test_username_is_case_sensitive(self):
        rows = entries(make_entry(1, "Alice"))
        assert find_current_player(rows, PlayerIdentity(username="alice")) is None

    def test_matches_by_wallet_address(self):
        rows = entries(make_entry(1, "a"), make_entry(2, "b", wallet=WALLET_A))
        match = find_current_player(rows, PlayerIdentity(username="zed", wallet_address=WALLET_A))
        assert match.rank == 2

    def test_wallet_match_is_case_sensitive(self):
        rows = entries(make_entry(1, "a", wallet=WALLET_B))
        assert find_current_player(rows, PlayerIdentity(wallet_address=WALLET_B.lower())) is None

    def test_profile_keeps_address_as_entered(self):
        state = ProfileState(f"  {WALLET_B} ")
        rows = entries(make_entry(1, "a", wallet=WALLET_B))
        assert state.address == WALLET_B
        assert find_current_player(rows, PlayerIdentity(wallet_address=state.address)).rank == 1

    def test_empty_wallet_never_matches(self):
        row = LeaderboardEntry.from_dict({**make_entry(1, "a"), "walletAddress": ""})
        assert not is_current_player(row, PlayerIdentity(username="x", wallet_address=""))

    def test_first_match_wins(self):
        rows = entries(make_entry(1, "a", wallet=WALLET_A), make_entry(2, "b"))
        match = find_current_player(rows, PlayerIdentity(username="b", wallet_address=WALLET_A))
        assert match.rank == 1

    def test_identity_from_blank_options_is_none(self):
        assert PlayerIdentity.from_options(None, "  ") is None
        assert PlayerIdentity.from_options("hero", None) == PlayerIdentity(username="hero")


async def loaded_state(fixed_clock, page=1, total_pages=3):
    session = FakeSession([FakeResponse(make_leaderboard_payload(page=page, total_pages=total_pages))])
    service = LeaderboardService(session, [], base_url="https://lb.example/api", clock=fixed_clock)
    state = LeaderboardState()
    await state.load(service, page)
    return state, service, session


class TestNavigation:
    @pytest.mark.asyncio
    async def test_previous_is_noop_on_first_page(self, fixed_clock):
        state, service, session = await loaded_state(fixed_clock, page=1)

        assert state.has_previous is False
        assert await state.previous_page(service) is False
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_next_is_noop_on_last_page(self, fixed_clock):
        state, service, session = await loaded_state(fixed_clock, page=3)

        assert state.has_next is False
        assert await state.next_page(service) is False
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_next_and_previous_move_one_page(self, fixed_clock):
        state, service, session = await loaded_state(fixed_clock, page=2)
        session.outcomes = [
            FakeResponse(make_leaderboard_payload(page=3)),
            FakeResponse(make_leaderboard_payload(page=2)),
        ]

        assert await state.next_page(service) is True
        assert state.current_page == 3
        assert await state.previous_page(service) is True
        assert state.current_page == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [0, 4, -1])
    async def test_jump_outside_range_never_requests(self, fixed_clock, page):
        state, service, session = await loaded_state(fixed_clock, page=1)

        with pytest.raises(PageOutOfRangeError):
            await state.jump_to(service, page)
        assert len(session.calls) == 1

    @pytest.mark.asyncio
    async def test_jump_within_range(self, fixed_clock):
        state, service, session = await loaded_state(fixed_clock, page=1)
        session.outcomes = [FakeResponse(make_leaderboard_payload(page=3))]

        assert await state.jump_to(service, 3) is True
        assert state.current_page == 3


class TestPageWindow:
    def test_small_leaderboard_lists_every_page(self):
        assert list(page_window(1, 3)) == [1, 2, 3]

    def test_window_is_centred_on_current_page(self):
        window = page_window(50, 100)
        assert len(window) == 25
        assert 50 in window
        assert window[0] == 38

    def test_window_clamps_to_edges(self):
        assert list(page_window(1, 100))[:2] == [1, 2]
        assert list(page_window(100, 100))[-1] == 100
        assert len(page_window(100, 100)) == 25
