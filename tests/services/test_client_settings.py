"""Tests for ClientSettings loading, overlaying and persistence."""

import json

import pytest

from simpleleaderboard.services.config import ClientSettings, ClientSettingsManager
from simpleleaderboard.services.config.client_settings import env_overrides


class TestFromEnv:
    """Tests for reading settings from the environment."""

    def test_reads_all_variables(self) -> None:
        settings = ClientSettings.from_env(
            {
                "LEADERBOARD_BASE_URL": "https://x.io",
                "LEADERBOARD_PATH": "/scores",
                "LEADERBOARD_TIMEOUT": "5",
            }
        )

        assert settings == ClientSettings(
            base_url="https://x.io", default_path="/scores", timeout=5.0
        )

    def test_empty_environment_gives_defaults(self) -> None:
        assert ClientSettings.from_env({}) == ClientSettings()

    def test_invalid_timeout_raises(self) -> None:
        with pytest.raises(ValueError):
            ClientSettings.from_env({"LEADERBOARD_TIMEOUT": "soon"})


class TestMerged:
    """Tests for overlaying overrides onto settings."""

    def test_non_empty_fields_override(self) -> None:
        base = ClientSettings(base_url="https://a.io", default_path="scores")

        merged = base.merged(base_url="https://b.io")

        assert merged == ClientSettings(base_url="https://b.io", default_path="scores")

    def test_empty_overlay_changes_nothing(self) -> None:
        base = ClientSettings(base_url="https://a.io", default_path="scores", timeout=3.0)

        assert base.merged() == base
        assert base.merged(**env_overrides({})) == base

    def test_explicit_default_timeout_overrides(self) -> None:
        """A timeout equal to the default still replaces a configured one."""
        base = ClientSettings(base_url="https://a.io", timeout=10.0)

        merged = base.merged(timeout=ClientSettings.DEFAULT_TIMEOUT)

        assert merged.timeout == ClientSettings.DEFAULT_TIMEOUT


class TestClientSettingsManager:
    """Tests for JSON persistence of settings."""

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        manager = ClientSettingsManager(settings_path=tmp_path / "missing.json")

        assert manager.load() == ClientSettings()

    def test_round_trip(self, tmp_path) -> None:
        path = tmp_path / "nested" / "settings.json"
        manager = ClientSettingsManager(settings_path=path)
        settings = ClientSettings(base_url="https://x.io", default_path="/scores", timeout=12.5)

        manager.save(settings)

        assert path.exists()
        assert manager.load() == settings

    def test_partial_file_fills_defaults(self, tmp_path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"base_url": "https://x.io"}))

        settings = ClientSettingsManager(settings_path=path).load()

        assert settings.base_url == "https://x.io"
        assert settings.default_path == ""
        assert settings.timeout == ClientSettings.DEFAULT_TIMEOUT

    @pytest.mark.parametrize(
        "content",
        [pytest.param("[]", id="array"), pytest.param('"https://x.io"', id="string")],
    )
    def test_non_object_file_raises_value_error(self, tmp_path, content: str) -> None:
        path = tmp_path / "settings.json"
        path.write_text(content)

        with pytest.raises(ValueError, match="JSON object"):
            ClientSettingsManager(settings_path=path).load()
