"""
Custom exceptions for the leaderboard and profile views with user-friendly error messages.
"""

class DungeonBotError(Exception):
    """Base exception for errors surfaced to Discord users."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class HttpStatusError(DungeonBotError):
    """Raised when an upstream endpoint answers with a non-2xx status."""
    def __init__(self, status: int, reason: str = ""):
        super().__init__(
            f"Server returned {status}: {reason}".rstrip(": "),
            "❌ The server returned an error. Please try again later."
        )
        self.status = status
        self.reason = reason or ""

class CandidateRequestError(DungeonBotError):
    """Raised when a single leaderboard URL candidate fails."""
    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Request to {url} failed: {reason}",
            "❌ The leaderboard server could not be reached."
        )
        self.url = url
        self.reason = reason

class LeaderboardUnavailableError(DungeonBotError):
    """Raised when every leaderboard URL candidate failed."""
    def __init__(self, failures: list):
        self.failures = list(failures)
        last = self.failures[-1].reason if self.failures else "All CORS proxies failed"
        super().__init__(
            last,
            f"❌ Failed to load leaderboard data: {last}"
        )

class PageOutOfRangeError(DungeonBotError):
    """Raised when a page outside the known range is requested."""
    def __init__(self, page: int, total_pages: int):
        super().__init__(
            f"Page {page} outside of range 1..{total_pages}",
            f"❌ Page must be between 1 and {total_pages}."
        )
        self.page = page
        self.total_pages = total_pages

class InvalidWalletAddressError(DungeonBotError):
    """Raised when a wallet address is missing or malformed."""
    def __init__(self, address: str):
        super().__init__(
            f"Invalid wallet address: {address!r}",
            "🔍 Invalid or missing wallet address in the archives."
        )
        self.address = address

class StatsUnavailableError(DungeonBotError):
    """Raised when the player stats endpoint fails."""
    def __init__(self, reason: str):
        super().__init__(
            reason,
            f"Failed to consult the ancient records: {reason}"
        )
        self.reason = reason

class EventsUnavailableError(DungeonBotError):
    """Raised when the player events endpoint fails."""
    def __init__(self, reason: str):
        super().__init__(
            reason,
            f"Failed to decipher the runestones: {reason}"
        )
        self.reason = reason
