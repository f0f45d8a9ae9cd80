"""Config services for backend connection settings."""

from simpleleaderboard.services.config.client_settings import (
    ClientSettings,
    ClientSettingsManager,
)

__all__ = [
    "ClientSettings",
    "ClientSettingsManager",
]
