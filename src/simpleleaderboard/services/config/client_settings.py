"""ClientSettings - Connection settings for the leaderboard backend."""

import json
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import ClassVar

DEFAULT_SETTINGS_PATH = Path.home() / ".simpleleaderboard" / "settings.json"

BASE_URL_ENV_VAR = "LEADERBOARD_BASE_URL"
PATH_ENV_VAR = "LEADERBOARD_PATH"
TIMEOUT_ENV_VAR = "LEADERBOARD_TIMEOUT"


@dataclass(frozen=True)
class ClientSettings:
    """Where leaderboard requests are sent.

    Example:
        ClientSettings(base_url="https://mysimpleleaderboard.com", default_path="/scores")
    """

    DEFAULT_TIMEOUT: ClassVar[float] = 30.0

    base_url: str = ""
    default_path: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "ClientSettings":
        """Read settings from LEADERBOARD_* environment variables.

        Raises:
            ValueError: If LEADERBOARD_TIMEOUT is not a number.
        """
        return cls().merged(**env_overrides(environ))

    def merged(
        self,
        base_url: str | None = None,
        default_path: str | None = None,
        timeout: float | None = None,
    ) -> "ClientSettings":
        """Return a copy with every given (non-empty) field replaced."""
        changes: dict = {}
        if base_url:
            changes["base_url"] = base_url
        if default_path:
            changes["default_path"] = default_path
        if timeout is not None:
            changes["timeout"] = timeout
        return replace(self, **changes)


def env_overrides(environ: Mapping[str, str] = os.environ) -> dict:
    """Collect the LEADERBOARD_* variables that are set, for ``merged``.

    Raises:
        ValueError: If LEADERBOARD_TIMEOUT is not a number.
    """
    timeout = environ.get(TIMEOUT_ENV_VAR)
    return {
        "base_url": environ.get(BASE_URL_ENV_VAR),
        "default_path": environ.get(PATH_ENV_VAR),
        "timeout": float(timeout) if timeout else None,
    }


class ClientSettingsManager:
    """Manages client settings persistence to JSON file."""

    def __init__(self, settings_path: Path = DEFAULT_SETTINGS_PATH) -> None:
        self._path = settings_path

    def load(self) -> ClientSettings:
        """Load settings from disk. Returns defaults if file missing."""
        if not self._path.exists():
            return ClientSettings()
        data = json.loads(self._path.read_text())
        if not isinstance(data, dict):
            raise ValueError(
                f"Settings file {self._path} must hold a JSON object, "
                f"got {type(data).__name__}"
            )
        defaults = ClientSettings()
        return ClientSettings(
            base_url=data.get("base_url", defaults.base_url),
            default_path=data.get("default_path", defaults.default_path),
            timeout=float(data.get("timeout", defaults.timeout)),
        )

    def save(self, settings: ClientSettings) -> None:
        """Save settings to disk."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(asdict(settings), indent=2) + "\n")
