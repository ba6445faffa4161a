"""MaxMind DB client for infrastructure layer.

Public API (Package Level):
- DatabaseContext: Per-execution-context database state (lazy open, refresh)
- DatabaseHandle: An opened, read-only database
- Ready / Failed / HandleState: The states a context can be in
- open_database / database_paths: Database discovery
- DatabaseError and subclasses: Database failures

Usage:
    from infrastructure.services import create_database_context

    context = create_database_context()
    state = context.current()
    if state.is_ready:
        raw = state.handle.get("8.8.8.8")
"""

from infrastructure.clients.maxmind.client import (
    DatabaseHandle,
    database_paths,
    open_database,
)
from infrastructure.clients.maxmind.context import (
    DatabaseContext,
    Failed,
    HandleState,
    Ready,
)
from infrastructure.clients.maxmind.errors import (
    DatabaseCorruptError,
    DatabaseError,
    DatabaseNotInstalledError,
)

__all__ = [
    "DatabaseContext",
    "DatabaseHandle",
    "HandleState",
    "Ready",
    "Failed",
    "open_database",
    "database_paths",
    "DatabaseError",
    "DatabaseNotInstalledError",
    "DatabaseCorruptError",
]
