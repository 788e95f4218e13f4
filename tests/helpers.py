"""
Test doubles and payload builders shared by the test modules.
"""


class FakeResponse:
    """Stands in for ``aiohttp.ClientResponse`` inside ``async with session.get(...)``."""

    def __init__(self, payload=None, status=200, reason="OK", error=None):
        self.payload = payload
        self.status = status
        self.reason = reason
        self.error = error

    async def __aenter__(self):
        # Transport errors surface when the request is entered
        if self.error is not None:
            raise self.error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, content_type="application/json"):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """
    Minimal ``aiohttp.ClientSession`` replacement.

    ``outcomes`` is either a list consumed one per request or a dict of
    URL substring to response, used when request order is not fixed.
    """

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if isinstance(self.outcomes, dict):
            for fragment, outcome in self.outcomes.items():
                if fragment in url:
                    return outcome
            raise AssertionError(f"Unexpected request to {url}")
        if not self.outcomes:
            raise AssertionError(f"Unexpected request to {url}")
        return self.outcomes.pop(0)

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


WALLET_A = "0x" + "a" * 40
WALLET_B = "0x" + "B" * 40


def make_entry(rank, username, wallet=None, score=None):
    return {
        "userId": 1000 + rank,
        "username": username,
        "walletAddress": wallet or "0x" + f"{rank:040x}",
        "score": score if score is not None else 10_000 - rank * 100,
        "gameId": 135,
        "gameName": "Dark Dungeon",
        "rank": rank,
    }


def make_leaderboard_payload(page=1, total_pages=3, entries=None, limit=2, total=None):
    if entries is None:
        first = (page - 1) * limit + 1
        entries = [make_entry(rank, f"player{rank}") for rank in range(first, first + limit)]
    return {
        "data": entries,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": str(total if total is not None else total_pages * limit),
            "totalPages": total_pages,
        },
        "sortBy": "scores",
        "sortOrder": "desc",
        "gameId": 135,
    }
