"""Fixtures for packages.geolocate tests."""

import pytest

from infrastructure.clients.maxmind import DatabaseContext


@pytest.fixture
def ready_context(settings, install_database, patch_open):
    """A context whose database is installed and served by fake_reader."""
    install_database()
    return DatabaseContext(settings, context_id="test")


@pytest.fixture
def missing_context(settings, patch_open):
    """A context with no database installed."""
    return DatabaseContext(settings, context_id="test")
