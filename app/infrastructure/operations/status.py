"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of operations
so callers can tell caller mistakes from recoverable database failures.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Recoverable error (database missing or unreadable,
            cleared by a refresh)
        PERMANENT_ERROR: Non-recoverable error (invalid caller input)
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
