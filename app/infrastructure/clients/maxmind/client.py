"""MaxMind DB handle discovery and opening.

Locates the database under the host's install root and opens it read-only
through the maxminddb engine, memory-mapped so lookups never touch the disk
again after the open.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

import maxminddb
import structlog

from infrastructure.clients.maxmind.errors import (
    DatabaseCorruptError,
    DatabaseError,
    DatabaseNotInstalledError,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class DatabaseHandle:
    """An opened, read-only database.

    The handle is never mutated. A refresh builds a new handle and swaps it
    in; the old reader stays usable by anyone still holding it and is
    released when the last reference goes away.

    Attributes:
        reader: maxminddb reader opened in MODE_MMAP
        path: file the reader was opened from
    """

    reader: Any
    path: str

    def get(self, ip_address) -> Optional[dict]:
        """Return the raw record stored for an address, or None.

        Raises:
            DatabaseError: the engine failed while reading the record
        """
        try:
            return self.reader.get(ip_address)
        except maxminddb.InvalidDatabaseError as e:
            raise DatabaseCorruptError(str(e), path=self.path) from e
        except ValueError as e:
            # e.g. an IPv6 address against an IPv4-only database
            raise DatabaseError(str(e)) from e
        except Exception as e:
            # malformed data sections surface as arbitrary decoder errors
            raise DatabaseCorruptError(str(e), path=self.path) from e

    def metadata(self) -> dict:
        """Summarize the database metadata."""
        meta = self.reader.metadata()
        return {
            "path": self.path,
            "database_type": meta.database_type,
            "build_epoch": meta.build_epoch,
            "ip_version": meta.ip_version,
            "languages": list(meta.languages),
        }


def database_paths(settings: "Settings") -> Tuple[str, str]:
    """Return the (primary, fallback) database locations, in probe order.

    Args:
        settings: Settings instance with the maxmind section

    Returns:
        Tuple of primary and fallback paths under the install root
    """
    root = settings.maxmind.MAXMIND_INSTALL_ROOT
    return (
        os.path.join(root, settings.maxmind.MAXMIND_DB_FILENAME),
        os.path.join(root, settings.maxmind.MAXMIND_FALLBACK_DB_PATH),
    )


def open_database(settings: "Settings") -> DatabaseHandle:
    """Open the first database file that exists.

    Probes the primary location, then the fallback location.

    Args:
        settings: Settings instance with the maxmind section

    Returns:
        DatabaseHandle wrapping a memory-mapped reader

    Raises:
        DatabaseNotInstalledError: neither location exists
        DatabaseCorruptError: a file exists but could not be opened
    """
    primary, fallback = database_paths(settings)
    log = logger.bind(component="maxmind_client", primary=primary, fallback=fallback)

    for path in (primary, fallback):
        if not os.path.exists(path):
            continue

        log.debug("opening_database", path=path)
        try:
            reader = maxminddb.open_database(path, maxminddb.MODE_MMAP)
        except Exception as e:
            # malformed metadata raises TypeError, KeyError or IndexError too
            log.error("database_open_failed", path=path, error=str(e))
            raise DatabaseCorruptError(str(e), path=path) from e

        log.info("database_opened", path=path)
        return DatabaseHandle(reader=reader, path=path)

    log.warning("database_not_installed")
    raise DatabaseNotInstalledError(
        primary, fallback, settings.maxmind.MAXMIND_DOWNLOAD_URL
    )
