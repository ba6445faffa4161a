"""Shared fixtures for mmdb-bridge tests."""

import shutil
from pathlib import Path
from unittest.mock import Mock

import pytest

from infrastructure.configuration import MaxMindSettings, Settings
from tests.factories.maxmind import make_asn_response, make_city_response
from tests.fixtures.maxmind_reader import FakeReader

COUNTRY_TEST_DATABASE = Path(__file__).parent / "fixtures" / "GeoIP2-Country-Test.mmdb"

# Carries the metadata marker, but the metadata map is truncated
BAD_METADATA_DATABASE = b"\xab\xcd\xefMaxMind.com\xe0"


@pytest.fixture
def install_root(tmp_path):
    """Empty install root; no database is installed yet."""
    return tmp_path


@pytest.fixture
def make_settings():
    def _make_settings(root):
        return Settings(maxmind=MaxMindSettings(MAXMIND_INSTALL_ROOT=str(root)))

    return _make_settings


@pytest.fixture
def settings(install_root, make_settings):
    return make_settings(install_root)


@pytest.fixture
def install_database(install_root):
    """Place a database file at the primary or fallback location.

    The file content is a placeholder; tests that open it patch the engine.
    """

    def _install(location="primary", root=None):
        root = root or install_root
        if location == "primary":
            path = root / "maxminddb.mmdb"
        else:
            path = root / "data" / "maxminddb.dat"
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"placeholder")
        return path

    return _install


@pytest.fixture
def fake_reader():
    return FakeReader(
        records={
            "8.8.8.8": {**make_city_response(), **make_asn_response()},
        }
    )


@pytest.fixture
def patch_open(monkeypatch, fake_reader):
    """Replace maxminddb.open_database; the mock returns fake_reader."""
    open_mock = Mock(return_value=fake_reader)
    monkeypatch.setattr("maxminddb.open_database", open_mock)
    return open_mock


@pytest.fixture
def install_country_database(install_root):
    """Install a real GeoIP2-Country database holding 8.8.8.0/24 (US)."""

    def _install(root=None):
        path = (root or install_root) / "maxminddb.mmdb"
        shutil.copyfile(COUNTRY_TEST_DATABASE, path)
        return path

    return _install


@pytest.fixture
def install_bad_metadata_database(install_root):
    """Install a file the engine recognizes but cannot read the metadata of."""

    def _install(root=None):
        path = (root or install_root) / "maxminddb.mmdb"
        path.write_bytes(BAD_METADATA_DATABASE)
        return path

    return _install
