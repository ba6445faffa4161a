"""Operation result types and status enums.

This module contains standardized result types for operations across
the application, including status enums, result dataclasses, and error
classifiers for database and input exceptions.
"""

from infrastructure.operations.classifiers import (
    classify_database_error,
    classify_input_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_database_error",
    "classify_input_error",
]
