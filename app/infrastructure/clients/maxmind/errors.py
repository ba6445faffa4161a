"""Errors raised while opening or reading the MaxMind database."""


class DatabaseError(Exception):
    """Base class for database failures.

    Raised directly for failures reported by the engine during a lookup, and
    subclassed for failures detected while opening the database.

    Attributes:
        error_code: machine error code reported alongside the message
    """

    error_code = "DATABASE_ERROR"


class DatabaseNotInstalledError(DatabaseError):
    """Neither database location exists under the install root."""

    error_code = "DB_NOT_INSTALLED"

    def __init__(self, primary_path: str, fallback_path: str, download_url: str):
        super().__init__(
            "You didn't install the MaxMindDB database! "
            f"I expected to find one in {primary_path} or {fallback_path}, "
            f"you can get it from here: {download_url}"
        )
        self.primary_path = primary_path
        self.fallback_path = fallback_path
        self.download_url = download_url


class DatabaseCorruptError(DatabaseError):
    """A database file exists but the engine could not open it.

    The message is the engine's own error text.
    """

    error_code = "DB_CORRUPT"

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
