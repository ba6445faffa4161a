"""
Factory functions for dependency injection.

Provides the application-scoped settings singleton and the factory for
per-execution-context database state.
"""

from functools import lru_cache
from typing import Optional

from infrastructure.configuration import Settings
from infrastructure.clients.maxmind import DatabaseContext


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per
    process. Settings are read-only, so sharing them across execution
    contexts is safe.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def create_database_context(
    settings: Optional[Settings] = None, context_id: Optional[str] = None
) -> DatabaseContext:
    """
    Create the database state for one execution context.

    Not cached: each worker or script VM owns its own DatabaseContext and
    nothing is shared between them.

    Args:
        settings: Optional settings override. Defaults to get_settings().
        context_id: Optional identifier bound into log entries.

    Returns:
        DatabaseContext: A fresh context whose database is opened lazily.
    """
    return DatabaseContext(settings=settings or get_settings(), context_id=context_id)
