"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
using structlog.

Public API:
    - configure_logging(): Initialize logging for the host process
    - get_module_logger(): Get a logger for the calling module
    - bind_context(): Context manager binding an execution-context id

Example:
    from infrastructure.logging import get_module_logger, bind_context

    logger = get_module_logger()

    with bind_context(context_id="worker-1"):
        logger.info("lookup_started")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import bind_context
from infrastructure.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_context",
    "add_app_info",
    "truncate_large_values",
]
