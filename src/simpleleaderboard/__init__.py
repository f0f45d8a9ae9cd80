"""Minimal client for submitting and retrieving leaderboard entries."""

__version__ = "0.1.0"
