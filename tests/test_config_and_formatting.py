"""Tests for settings and text formatting helpers."""

from core.config import DEFAULT_IMAGE_TIMEOUT_S, DEFAULT_USER_AGENT, Settings
from core.formatting import attribution_line, format_duration, format_saves
from core.catalog import demo_playlist


class TestSettings:
    def test_defaults(self):
        s = Settings.from_env({})
        assert s.catalog_path is None
        assert s.log_level == "INFO"
        assert s.image_timeout_s == DEFAULT_IMAGE_TIMEOUT_S
        assert s.user_agent == DEFAULT_USER_AGENT
        assert s.offline is False

    def test_overrides(self):
        s = Settings.from_env({
            "PLAYLIST_VIEW_CATALOG": "/tmp/mix.json",
            "PLAYLIST_VIEW_LOG_LEVEL": "debug",
            "PLAYLIST_VIEW_IMAGE_TIMEOUT": "2.5",
            "PLAYLIST_VIEW_USER_AGENT": "tests/1.0",
            "PLAYLIST_VIEW_OFFLINE": "1",
        })
        assert s.catalog_path == "/tmp/mix.json"
        assert s.log_level == "DEBUG"
        assert s.image_timeout_s == 2.5
        assert s.user_agent == "tests/1.0"
        assert s.offline is True

    def test_bad_values_fall_back(self):
        s = Settings.from_env({
            "PLAYLIST_VIEW_IMAGE_TIMEOUT": "soon",
            "PLAYLIST_VIEW_LOG_LEVEL": "LOUD",
        })
        assert s.image_timeout_s == DEFAULT_IMAGE_TIMEOUT_S
        assert s.log_level == "INFO"

    def test_non_positive_timeout_falls_back(self):
        assert Settings.from_env({"PLAYLIST_VIEW_IMAGE_TIMEOUT": "0"}).image_timeout_s == DEFAULT_IMAGE_TIMEOUT_S


class TestFormatting:
    def test_format_saves(self):
        assert format_saves(800_000) == "800,000 saves"
        assert format_saves(1) == "1 save"
        assert format_saves(0) == "0 saves"

    def test_format_duration(self):
        assert format_duration(35 * 60) == "35m"
        assert format_duration(65 * 60) == "1h 5m"
        assert format_duration(2 * 3600) == "2h"
        assert format_duration(45) == "45s"

    def test_attribution_line_for_demo(self):
        assert attribution_line(demo_playlist().header) == "Bebe Rexha • 800,000 saves • 35m"
