"""HTTP client for the leaderboard backend.

Sends one GET or POST per call to ``base_url/path`` using httpx and hands
the raw response body back to the caller. Payloads are never parsed here;
see ``parse_entries`` for decoding a GET response.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import httpx

from simpleleaderboard.services.config import ClientSettings
from simpleleaderboard.services.leaderboard.entry import Entry, parse_entries

_log = logging.getLogger(__name__)

ResponseCallback = Callable[[str | None], None]


class LeaderboardError(Exception):
    """Error from a leaderboard request."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(LeaderboardError):
    """The base URL is missing or malformed, so no request can be made."""


class TransportError(LeaderboardError):
    """The exchange failed before a usable response arrived (timeout, DNS, bad encoding)."""


class BackendError(LeaderboardError):
    """The backend answered with an HTTP status of 400 or above."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Error code: {status_code} - {body}", status_code=status_code)
        self.body = body


@dataclass(frozen=True)
class LeaderboardResult:
    """Terminal outcome of a single leaderboard request."""

    body: str | None = None
    error: LeaderboardError | None = None
    status_code: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class LeaderboardClient:
    """Sends leaderboard requests to the configured backend.

    Each call opens and closes its own connection, so calls may run
    concurrently without sharing state beyond the read-only settings.
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def resolve_url(self, path: str | None = None) -> str:
        """Combine the base URL with ``path`` or the default path.

        A slash is inserted unless the base URL already ends with one or the
        path already starts with one. Doubled slashes are left alone.

        Raises:
            ConfigurationError: If the base URL is not set.
        """
        base_url = self._settings.base_url
        if not base_url:
            _log.error("BaseUrl must be set.")
            raise ConfigurationError("BaseUrl must be set.")

        if not path:
            path = self._settings.default_path or ""

        needs_slash = not (base_url.endswith("/") or path.startswith("/"))
        return f"{base_url}{'/' if needs_slash else ''}{path}"

    async def get(
        self,
        path: str | None = None,
        on_complete: ResponseCallback | None = None,
    ) -> LeaderboardResult:
        """Send a GET request and return the raw body (a JSON array of entries)."""
        return await self._send("GET", path, None, on_complete)

    async def post(
        self,
        fields: Mapping[str, str],
        path: str | None = None,
        on_complete: ResponseCallback | None = None,
    ) -> LeaderboardResult:
        """Send ``fields`` form-encoded in a POST request and return the raw body."""
        return await self._send("POST", path, dict(fields), on_complete)

    async def fetch_entries(self, path: str | None = None) -> list[Entry]:
        """Retrieve all submitted entries. Returns an empty list on failure.

        Raises:
            ValueError: If the backend answered with something other than
                a JSON array of entries.
        """
        result = await self.get(path)
        return parse_entries(result.body)

    async def submit_entry(self, entry: Entry, path: str | None = None) -> str | None:
        """Submit an entry and return the backend's response (its database id)."""
        result = await self.post(entry.to_field_map(), path)
        return result.body

    async def _send(
        self,
        method: str,
        path: str | None,
        fields: dict[str, str] | None,
        on_complete: ResponseCallback | None,
    ) -> LeaderboardResult:
        try:
            url = self.resolve_url(path)
        except ConfigurationError as e:
            result = LeaderboardResult(error=e)
        else:
            result = await self._exchange(method, url, fields)

        if on_complete is not None:
            on_complete(result.body)
        return result

    async def _exchange(
        self, method: str, url: str, fields: dict[str, str] | None
    ) -> LeaderboardResult:
        """Perform the HTTP exchange and normalize every outcome into a result."""
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, data=fields)
        except httpx.InvalidURL as e:
            _log.error("Invalid url %s: %s", url, e)
            error = ConfigurationError(f"Invalid url {url}: {e}")
            error.__cause__ = e
            return LeaderboardResult(error=error)
        except httpx.RequestError as e:
            message = str(e) or type(e).__name__
            _log.error("%s %s failed: %s", method, url, message)
            error = TransportError(message)
            error.__cause__ = e
            return LeaderboardResult(error=error)

        if response.status_code >= 400:
            _log.error("Error code: %s - %s", response.status_code, response.text)
            return LeaderboardResult(
                error=BackendError(response.status_code, response.text),
                status_code=response.status_code,
            )

        _log.debug("%s %s -> %s", method, url, response.status_code)
        return LeaderboardResult(body=response.text, status_code=response.status_code)
