"""Shared test fixtures for simpleleaderboard tests."""

from collections.abc import Callable

import httpx
import pytest

from simpleleaderboard.services.config import ClientSettings
from simpleleaderboard.services.leaderboard import LeaderboardClient

BASE_URL = "https://x.io"


class RecordingBackend:
    """Fake backend that records requests and replies with a canned response.

    Pass ``error`` to simulate a transport failure instead of a response.
    """

    def __init__(
        self,
        status_code: int = 200,
        body: str = "",
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def make_client() -> Callable[..., tuple[LeaderboardClient, RecordingBackend]]:
    """Build a client wired to a RecordingBackend."""

    def _make(
        base_url: str = BASE_URL,
        default_path: str = "scores",
        **backend_kwargs,
    ) -> tuple[LeaderboardClient, RecordingBackend]:
        backend = RecordingBackend(**backend_kwargs)
        settings = ClientSettings(base_url=base_url, default_path=default_path)
        return LeaderboardClient(settings, transport=backend.transport), backend

    return _make
