"""
Dependency injection services.

Provides provider functions for the settings singleton and per-context
database state.
"""

from infrastructure.services.providers import (
    get_settings,
    create_database_context,
)

__all__ = [
    "get_settings",
    "create_database_context",
]
