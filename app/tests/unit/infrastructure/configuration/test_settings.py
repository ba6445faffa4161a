"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- MaxMindSettings defaults and environment overrides
- Settings aggregation and production detection
"""

import pytest

from infrastructure.configuration import MaxMindSettings, Settings


@pytest.mark.unit
class TestMaxMindSettings:
    """Test suite for MaxMindSettings configuration."""

    def test_maxmind_settings_defaults(self, monkeypatch):
        """MaxMindSettings uses the documented discovery defaults."""
        for name in (
            "MAXMIND_INSTALL_ROOT",
            "MAXMIND_DB_FILENAME",
            "MAXMIND_FALLBACK_DB_PATH",
            "MAXMIND_DOWNLOAD_URL",
        ):
            monkeypatch.delenv(name, raising=False)

        maxmind = MaxMindSettings(_env_file=None)

        assert maxmind.MAXMIND_INSTALL_ROOT == "."
        assert maxmind.MAXMIND_DB_FILENAME == "maxminddb.mmdb"
        assert maxmind.MAXMIND_FALLBACK_DB_PATH == "data/maxminddb.dat"
        assert maxmind.MAXMIND_DOWNLOAD_URL == "https://maxmind.com"

    def test_maxmind_settings_from_environment(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("MAXMIND_INSTALL_ROOT", "/srv/host")
        monkeypatch.setenv("MAXMIND_DB_FILENAME", "GeoLite2-City.mmdb")

        maxmind = MaxMindSettings(_env_file=None)

        assert maxmind.MAXMIND_INSTALL_ROOT == "/srv/host"
        assert maxmind.MAXMIND_DB_FILENAME == "GeoLite2-City.mmdb"
        # Defaults preserved
        assert maxmind.MAXMIND_FALLBACK_DB_PATH == "data/maxminddb.dat"


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_instantiates_maxmind_section(self):
        """Settings builds the maxmind section when not provided."""
        settings = Settings()

        assert isinstance(settings.maxmind, MaxMindSettings)

    def test_settings_accepts_section_override(self):
        """An explicit section is used as-is."""
        maxmind = MaxMindSettings(MAXMIND_INSTALL_ROOT="/opt/host")

        settings = Settings(maxmind=maxmind)

        assert settings.maxmind.MAXMIND_INSTALL_ROOT == "/opt/host"

    def test_is_production_when_prefix_empty(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"
