"""Per-execution-context database state.

Each execution context owns one DatabaseContext. The database is opened
lazily on first use and the outcome, success or failure, is cached until
the host explicitly calls refresh.
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

import structlog

from infrastructure.clients.maxmind.client import DatabaseHandle, open_database
from infrastructure.clients.maxmind.errors import DatabaseError
from infrastructure.operations import OperationResult, classify_database_error

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class Ready:
    """The context holds an open database."""

    handle: DatabaseHandle

    @property
    def is_ready(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """The last open attempt failed; every lookup reports this error."""

    error: DatabaseError

    @property
    def is_ready(self) -> bool:
        return False


HandleState = Union[Ready, Failed]


def _attempt_open(settings: "Settings") -> HandleState:
    try:
        return Ready(open_database(settings))
    except DatabaseError as e:
        return Failed(e)


class DatabaseContext:
    """Database state owned by one execution context.

    Contexts never share state, so a failure or refresh in one context is
    invisible to the others. Within a context the state is guarded by a
    lock: readers copy the current state under it and run their lookup
    outside it, and refresh holds it only to swap the state.

    Args:
        settings: Settings instance with the maxmind section
        context_id: Optional identifier bound into log entries
    """

    def __init__(self, settings: "Settings", context_id: Optional[str] = None) -> None:
        self._settings = settings
        self._context_id = context_id
        self._state: Optional[HandleState] = None
        self._lock = threading.Lock()
        self._logger = logger.bind(
            component="database_context", context_id=context_id
        )

    @property
    def context_id(self) -> Optional[str]:
        return self._context_id

    def current(self) -> HandleState:
        """Return the context's state, opening the database on first use.

        The first call opens the database exactly once; every later call
        returns the cached outcome until refresh replaces it.

        Returns:
            Ready with the handle, or Failed with the recorded error
        """
        with self._lock:
            if self._state is None:
                self._state = _attempt_open(self._settings)
                self._log_state("database_initialized", self._state)
            return self._state

    def refresh(self) -> OperationResult:
        """Re-open the database and replace this context's state.

        On success the new handle replaces the old one. On failure the
        context becomes Failed with the new error, even if it was Ready
        before. Never raises.

        Returns:
            OperationResult with the opened path, or the database error
        """
        # Open outside the lock; the lock only guards the swap
        state = _attempt_open(self._settings)
        with self._lock:
            self._state = state
        self._log_state("database_refreshed", state)

        if isinstance(state, Failed):
            return classify_database_error(state.error)
        return OperationResult.success(
            data={"path": state.handle.path}, message="Database refreshed"
        )

    def healthcheck(self) -> OperationResult:
        """Report whether this context can serve lookups.

        Returns:
            OperationResult with the database metadata, or the database error
        """
        state = self.current()
        if isinstance(state, Failed):
            self._logger.warning("healthcheck_failed", error=str(state.error))
            return classify_database_error(state.error)

        return OperationResult.success(
            data={"status": "healthy", **state.handle.metadata()},
            message="MaxMind database is accessible",
        )

    def _log_state(self, event: str, state: HandleState) -> None:
        if isinstance(state, Ready):
            self._logger.info(event, ready=True, path=state.handle.path)
        else:
            self._logger.warning(
                event,
                ready=False,
                error_code=state.error.error_code,
                error=str(state.error),
            )
