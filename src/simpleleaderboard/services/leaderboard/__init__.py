"""Leaderboard services: entry model and backend client."""

from simpleleaderboard.services.leaderboard.client import (
    BackendError,
    ConfigurationError,
    LeaderboardClient,
    LeaderboardError,
    LeaderboardResult,
    TransportError,
)
from simpleleaderboard.services.leaderboard.entry import (
    ABSENT_TIMESTAMP,
    Entry,
    format_score,
    parse_entries,
)

__all__ = [
    "ABSENT_TIMESTAMP",
    "BackendError",
    "ConfigurationError",
    "Entry",
    "LeaderboardClient",
    "LeaderboardError",
    "LeaderboardResult",
    "TransportError",
    "format_score",
    "parse_entries",
]
