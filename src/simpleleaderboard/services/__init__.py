"""Services package - import from subdirectories directly.

Subpackages:
- config: Backend connection settings
- leaderboard: Entry model and HTTP client
"""
