"""Error classifiers for database and caller-input exceptions.

Converts the exceptions raised while opening or querying the MaxMind
database, or while validating caller input, into standardized
OperationResult objects so every caller reports failures the same way.

Usage:
    from infrastructure.operations.classifiers import classify_database_error

    try:
        handle = open_database(settings)
    except DatabaseError as exc:
        return classify_database_error(exc)
"""

from infrastructure.operations.result import OperationResult

DATABASE_ERROR = "DATABASE_ERROR"
INVALID_INPUT = "INVALID_INPUT"


def classify_database_error(exc: Exception) -> OperationResult:
    """Classify a database failure into OperationResult.

    Database failures are transient: the host can fix the file and call
    refresh. The exception message is forwarded verbatim so operators can
    diagnose missing or corrupt files from host-visible output.

    Error Code Mapping:
    - DatabaseNotInstalledError → DB_NOT_INSTALLED
    - DatabaseCorruptError → DB_CORRUPT
    - DatabaseError → DATABASE_ERROR
    - Other exception → DATABASE_ERROR, message prefixed with its type

    Args:
        exc: Exception raised while opening or reading the database

    Returns:
        OperationResult with TRANSIENT_ERROR status
    """
    # Duck typing on error_code avoids a circular import with the client package
    error_code = getattr(exc, "error_code", None)
    if error_code:
        return OperationResult.transient_error(str(exc), error_code=error_code)

    return OperationResult.transient_error(
        f"{type(exc).__name__}: {exc}",
        error_code=DATABASE_ERROR,
    )


def classify_input_error(exc: Exception) -> OperationResult:
    """Classify a caller-input failure into OperationResult.

    Input errors are permanent: repeating the call with the same arguments
    fails the same way. Exceptions carrying an ``error_code`` attribute keep
    it; anything else is reported as INVALID_INPUT.

    Args:
        exc: Exception raised while validating caller input

    Returns:
        OperationResult with PERMANENT_ERROR status
    """
    error_code = getattr(exc, "error_code", None) or INVALID_INPUT
    return OperationResult.permanent_error(str(exc), error_code=error_code)
